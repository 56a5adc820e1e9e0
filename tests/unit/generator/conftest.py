"""A small Scalr-shaped OpenAPI document shared by the generator tests."""

import copy

import pytest

JSONAPI = "application/vnd.api+json"


def _ref(name):
    return {"$ref": f"#/components/schemas/{name}"}


def _jsonapi(name):
    return {"content": {JSONAPI: {"schema": _ref(name)}}}


WORKSPACE_PATH_PARAM = {"in": "path", "name": "workspace", "required": True, "schema": {"type": "string"}}

OPENAPI_SPEC = {
    "openapi": "3.0.1",
    "info": {"title": "Scalr", "version": "1.0"},
    "servers": [{"url": "https://{Domain}/api/iacp/v3"}],
    "components": {
        "parameters": {
            "PreferParam": {
                "in": "header",
                "name": "Prefer",
                "required": True,
                "schema": {"type": "string", "default": "profile=preview"},
            }
        },
        "schemas": {
            "Tag": {
                "type": "object",
                "properties": {
                    "type": {"type": "string", "enum": ["tags"]},
                    "id": {"type": "string"},
                    "attributes": {"type": "object", "properties": {"name": {"type": "string"}}},
                },
            },
            "Workspace": {
                "type": "object",
                "description": "A workspace.",
                "properties": {
                    "type": {"type": "string", "enum": ["workspaces"]},
                    "id": {"type": "string", "readOnly": True},
                    "attributes": {
                        "type": "object",
                        "properties": {
                            "name": {"type": "string", "description": "Name of\n the workspace."},
                            "auto-apply": {"type": "boolean"},
                            "created-at": {"type": "string", "format": "date-time", "readOnly": True},
                            "execution-mode": {"type": "string", "enum": ["remote", "local"]},
                            "var-files": {"type": "array", "items": {"type": "string"}},
                            "vcs-repo": {
                                "type": "object",
                                "properties": {
                                    "identifier": {"type": "string"},
                                    "branch": {"type": "string"},
                                },
                            },
                        },
                    },
                    "relationships": {
                        "type": "object",
                        "properties": {
                            "tags": {
                                "type": "object",
                                "properties": {"data": {"type": "array", "items": _ref("TagRelationship")}},
                            },
                            "environment": {
                                "type": "object",
                                "properties": {
                                    "data": {
                                        "type": "object",
                                        "properties": {
                                            "type": {"type": "string", "enum": ["environments"]},
                                            "id": {"type": "string"},
                                        },
                                    }
                                },
                            },
                        },
                    },
                },
            },
            "TagRelationship": {
                "type": "object",
                "properties": {"type": {"type": "string", "enum": ["tags"]}, "id": {"type": "string"}},
            },
            "WorkspaceDocument": {"type": "object", "properties": {"data": _ref("Workspace")}},
            "WorkspaceListingDocument": {
                "type": "object",
                "properties": {"data": {"type": "array", "items": _ref("Workspace")}, "meta": {"type": "object"}},
            },
            "TagRelationshipFieldsDocument": {
                "type": "object",
                "properties": {"data": {"type": "array", "items": _ref("TagRelationship")}},
            },
            "Reason": {"type": "object", "properties": {"reason": {"type": "string"}}},
        },
    },
    "paths": {
        "/workspaces": {
            "get": {
                "operationId": "get_workspaces",
                "x-resource": "Workspace",
                "description": "List workspaces.",
                "parameters": [
                    {"in": "query", "name": "filter[name]", "schema": {"type": "string"}},
                    {"in": "query", "name": "page[number]", "schema": {"type": "integer"}},
                    {"in": "query", "name": "page[size]", "schema": {"type": "integer"}},
                    {"in": "query", "name": "include", "schema": {"type": "string"}},
                ],
                "responses": {"200": _jsonapi("WorkspaceListingDocument")},
            },
            "post": {
                "operationId": "create_workspace",
                "x-resource": "Workspace",
                "requestBody": _jsonapi("WorkspaceDocument"),
                "responses": {"201": _jsonapi("WorkspaceDocument")},
            },
        },
        "/workspaces/{workspace}": {
            "parameters": [WORKSPACE_PATH_PARAM],
            "get": {
                "operationId": "get_workspace",
                "x-resource": "Workspace",
                "responses": {"200": _jsonapi("WorkspaceDocument")},
            },
            "delete": {
                "operationId": "delete_workspace",
                "x-resource": "Workspace",
                "responses": {"204": {"description": "Deleted."}},
            },
        },
        "/workspaces/{workspace}/relationships/tags": {
            "parameters": [WORKSPACE_PATH_PARAM],
            "get": {
                "operationId": "get_workspace_tags",
                "x-resource": "Workspace",
                "responses": {"200": _jsonapi("TagRelationshipFieldsDocument")},
            },
            "post": {
                "operationId": "add_workspace_tags",
                "x-resource": "Workspace",
                "requestBody": _jsonapi("TagRelationshipFieldsDocument"),
                "responses": {"204": {"description": "Added."}},
            },
        },
        "/workspaces/{workspace}/actions/lock": {
            "parameters": [WORKSPACE_PATH_PARAM],
            "post": {
                "operationId": "lock_workspace",
                "x-resource": "Workspace",
                "requestBody": {"content": {"application/json": {"schema": _ref("Reason")}}},
                "responses": {"200": _jsonapi("WorkspaceDocument")},
            },
        },
        "/healthcheck": {
            "get": {
                "operationId": "healthcheck",
                "responses": {"200": {"content": {"text/plain": {"schema": {"type": "string"}}}}},
            }
        },
    },
}


@pytest.fixture
def openapi_spec():
    return copy.deepcopy(OPENAPI_SPEC)


@pytest.fixture(scope="session")
def shared_openapi_spec():
    """Read-only copy for fixtures wider than a single test."""
    return copy.deepcopy(OPENAPI_SPEC)
