"""Tests for mapping error responses to exceptions."""

from datetime import UTC, datetime, timedelta
from email.utils import format_datetime

import httpx
import pytest

from scalr_client.errors import (
    ConflictError,
    ForbiddenError,
    HTTPError,
    JSONAPIError,
    NotFoundError,
    ServerError,
    TooManyRequestsError,
    TransportError,
    UnauthorizedError,
    UnprocessableEntityError,
    exception_for,
    parse_errors,
    raise_for_status,
)
from scalr_client.testing import error_document, jsonapi_response


class TestExceptionFor:
    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("status", "expected"),
        [
            (401, UnauthorizedError),
            (403, ForbiddenError),
            (404, NotFoundError),
            (409, ConflictError),
            (422, UnprocessableEntityError),
            (429, TooManyRequestsError),
            (500, ServerError),
            (503, ServerError),
            (400, HTTPError),
        ],
    )
    def test_status_mapping(self, status, expected):
        error = exception_for(jsonapi_response(status, error_document(status, "Failed")))

        assert type(error) is expected
        assert error.status_code == status

    @pytest.mark.unit
    def test_message_from_first_error(self):
        response = jsonapi_response(
            422,
            {
                "errors": [
                    {"status": "422", "title": "Invalid Attribute", "detail": "name is blank"},
                    {"status": "422", "title": "Second"},
                ]
            },
        )

        error = exception_for(response)

        assert error.message == "Invalid Attribute: name is blank"
        assert str(error) == "unprocessable entity: Invalid Attribute: name is blank"
        assert len(error.errors) == 2
        assert error.error.title == "Invalid Attribute"

    @pytest.mark.unit
    def test_raw_body_when_not_jsonapi(self):
        error = exception_for(httpx.Response(502, text="Bad Gateway"))

        assert error.message == "Bad Gateway"
        assert error.errors == []

    @pytest.mark.unit
    def test_generic_label_uses_status(self):
        assert str(exception_for(httpx.Response(418, text="teapot"))) == "HTTP 418: teapot"

    @pytest.mark.unit
    def test_retry_after_on_429(self):
        error = exception_for(jsonapi_response(429, error_document(429, "Too many"), headers={"Retry-After": "7"}))

        assert error.retry_after == 7

    @pytest.mark.unit
    def test_retry_after_matches_transport_parsing(self):
        fractional = exception_for(
            jsonapi_response(429, error_document(429, "Too many"), headers={"Retry-After": "1.5"})
        )
        when = format_datetime(datetime.now(UTC) + timedelta(seconds=30), usegmt=True)
        dated = exception_for(jsonapi_response(429, error_document(429, "Too many"), headers={"Retry-After": when}))

        assert fractional.retry_after == 1.5
        assert 0 < dated.retry_after <= 30

    @pytest.mark.unit
    def test_unparsable_retry_after_is_ignored(self):
        error = exception_for(jsonapi_response(429, error_document(429, "Too many"), headers={"Retry-After": "soon"}))

        assert error.retry_after is None


class TestHelpers:
    @pytest.mark.unit
    def test_parse_errors_ignores_non_jsonapi(self):
        assert parse_errors(b"not json") == []
        assert parse_errors(b'{"message": "x"}') == []

    @pytest.mark.unit
    def test_raise_for_status(self):
        raise_for_status(httpx.Response(204))

        with pytest.raises(NotFoundError, match="not found: Not Found"):
            raise_for_status(jsonapi_response(404, error_document(404, "Not Found")))

    @pytest.mark.unit
    def test_error_round_trip_keeps_source(self):
        error = JSONAPIError.from_dict({"title": "Bad", "status": 400, "source": {"parameter": "page[size]"}})

        assert error.status == "400"
        assert error.to_dict()["source"] == {"pointer": "", "parameter": "page[size]"}

    @pytest.mark.unit
    def test_transport_error_str(self):
        assert str(TransportError("request failed after 3 retries: boom")) == "request failed after 3 retries: boom"
        assert str(TransportError()) == "transport error"
