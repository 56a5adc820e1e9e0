"""Testing utilities for code built on the Scalr client.

``MockAPI`` routes requests to canned JSON:API responses through
``httpx.MockTransport``, so services can be exercised without a network.
The document helpers build response bodies in the shape the API uses.

Example:
    ```python
    from scalr_client.testing import MockAPI, resource_document


    def test_read_environment():
        api = MockAPI()
        api.add("GET", "environments/env-1", json=resource_document("environments", "env-1", {"name": "dev"}))

        with api.client() as scalr:
            assert scalr.environments.read("env-1").name == "dev"
        assert api.calls[0].method == "GET"
    ```
"""

import json
from collections.abc import Callable, Mapping
from typing import Any

import httpx

from scalr_client.jsonapi import MEDIA_TYPE

TEST_HOSTNAME = "scalr.test"
TEST_TOKEN = "test-token"
BASE_PATH = "/api/iacp/v3/"

Handler = Callable[[httpx.Request], httpx.Response]


def resource_object(
    type_: str,
    id_: str,
    attributes: Mapping[str, Any] | None = None,
    relationships: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """A resource object; relationship values may be ``(type, id)`` pairs or lists of them."""
    resource: dict[str, Any] = {"type": type_, "id": id_, "attributes": dict(attributes or {})}
    if relationships:
        resource["relationships"] = {name: {"data": _linkage(value)} for name, value in relationships.items()}
    return resource


def _linkage(value: Any) -> Any:
    if value is None:
        return None
    if isinstance(value, list):
        return [{"type": type_, "id": id_} for type_, id_ in value]
    type_, id_ = value
    return {"type": type_, "id": id_}


def resource_document(
    type_: str,
    id_: str,
    attributes: Mapping[str, Any] | None = None,
    relationships: Mapping[str, Any] | None = None,
    *,
    included: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    document: dict[str, Any] = {"data": resource_object(type_, id_, attributes, relationships)}
    if included:
        document["included"] = included
    return document


def list_document(
    resources: list[dict[str, Any]],
    *,
    current_page: int = 1,
    total_pages: int = 1,
    page_size: int | None = None,
    included: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """A listing document with ``meta.pagination`` filled in."""
    page_size = page_size or max(len(resources), 1)
    pagination: dict[str, Any] = {
        "current-page": current_page,
        "page-size": page_size,
        "prev-page": current_page - 1 if current_page > 1 else None,
        "next-page": current_page + 1 if current_page < total_pages else None,
        "total-pages": total_pages,
        "total-count": total_pages * page_size if total_pages > 1 else len(resources),
    }
    document: dict[str, Any] = {"data": resources, "meta": {"pagination": pagination}}
    if included:
        document["included"] = included
    return document


def error_document(status: int, title: str, detail: str | None = None, pointer: str | None = None) -> dict[str, Any]:
    error: dict[str, Any] = {"status": str(status), "title": title}
    if detail is not None:
        error["detail"] = detail
    if pointer is not None:
        error["source"] = {"pointer": pointer}
    return {"errors": [error]}


def jsonapi_response(
    status_code: int = 200,
    json: Any = None,
    *,
    headers: Mapping[str, str] | None = None,
    text: str | None = None,
) -> httpx.Response:
    """An ``httpx.Response`` carrying a JSON:API body, or ``text`` as is."""
    response_headers = {"Content-Type": MEDIA_TYPE, **(headers or {})}
    if text is not None:
        return httpx.Response(status_code, text=text, headers=response_headers)
    if json is None:
        return httpx.Response(status_code, headers=response_headers)
    return httpx.Response(status_code, content=_dumps(json), headers=response_headers)


def _dumps(data: Any) -> bytes:
    return json.dumps(data).encode()


def request_json(request: httpx.Request) -> Any:
    """Decoded body of a captured request, or None when it has none."""
    content = request.content
    return json.loads(content) if content else None


class MockAPI:
    """Route table for ``httpx.MockTransport``.

    Routes match on method and on the path relative to the API root. Each
    route holds a queue of responses; the last one repeats once the queue
    is drained. Unmatched requests get a 404 error document.
    """

    def __init__(self) -> None:
        self._routes: dict[tuple[str, str], list[httpx.Response | Handler]] = {}
        self.calls: list[httpx.Request] = []

    def add(
        self,
        method: str,
        path: str,
        response: httpx.Response | Handler | None = None,
        *,
        status_code: int = 200,
        json: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> "MockAPI":
        if response is None:
            response = jsonapi_response(status_code, json, headers=headers)
        self._routes.setdefault((method.upper(), path.strip("/")), []).append(response)
        return self

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        path = request.url.path
        if path.startswith(BASE_PATH):
            path = path[len(BASE_PATH) :]
        queue = self._routes.get((request.method, path.strip("/")))
        if not queue:
            return jsonapi_response(404, error_document(404, "Not Found", f"no route for {request.method} {path}"))
        entry = queue.pop(0) if len(queue) > 1 else queue[0]
        if callable(entry) and not isinstance(entry, httpx.Response):
            return entry(request)
        return httpx.Response(entry.status_code, headers=entry.headers, content=entry.content)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def client(self, **options: Any):
        """A ``Client`` for ``scalr.test`` wired to this route table."""
        from scalr_client.client import Client

        options.setdefault("retry_max", 0)
        return Client(TEST_HOSTNAME, TEST_TOKEN, transport=self.transport, **options)


__all__ = [
    "TEST_HOSTNAME",
    "TEST_TOKEN",
    "MockAPI",
    "error_document",
    "jsonapi_response",
    "list_document",
    "request_json",
    "resource_document",
    "resource_object",
]
