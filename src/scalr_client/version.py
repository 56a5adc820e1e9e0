"""Library version and User-Agent helpers."""

import platform
import sys

__version__ = "0.1.0"

PRODUCT = "scalr-client"


def user_agent() -> str:
    """Return the default User-Agent for the client.

    Example: ``scalr-client/0.1.0 (Python 3.12; linux/x86_64)``
    """
    python = f"{sys.version_info.major}.{sys.version_info.minor}"
    system = platform.system().lower() or "unknown"
    machine = platform.machine().lower() or "unknown"
    return f"{PRODUCT}/{__version__} (Python {python}; {system}/{machine})"


def user_agent_with_app(app_name: str, app_version: str = "") -> str:
    """Prefix the default User-Agent with an application identifier.

    Example: ``terraform-provider-scalr/v3.9.0 scalr-client/0.1.0 (...)``
    """
    if not app_name:
        return user_agent()
    if app_version:
        return f"{app_name}/{app_version} {user_agent()}"
    return f"{app_name} {user_agent()}"
