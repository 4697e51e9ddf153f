"""
Exo Client -- Response reduction tests.
"""

import json

import pytest

from exoclient import (
    PaginationResult,
    PortionResult,
    ProtocolError,
    Response,
    ResponseError,
    Row,
    data_only,
    reduce,
)


class TestReduce:
    def test_success_body_becomes_response(self):
        body = {
            "version": "2.1",
            "root": "shop",
            "tag": "t",
            "rows": [
                {"resource": "orders", "data": [{"id": 1}], "range": {"page": 1, "pageSize": 10, "pageCount": 3}},
                {"resource": "customers", "data": [], "range": {"limit": 5, "offset": 0}},
                {"resource": "products", "data": [{"id": 9}]},
            ],
        }
        response = reduce(True, json.dumps(body))
        assert response.version == "2.1"
        assert response.root == "shop"
        assert response.tag == "t"
        assert [row.resource for row in response.rows] == ["orders", "customers", "products"]
        assert response.rows[0].range == PaginationResult(page=1, page_size=10, page_count=3)
        assert response.rows[1].range == PortionResult(limit=5, offset=0)
        assert response.rows[2].range is None

    def test_error_body_raised_verbatim(self):
        body = {"origin": "server", "message": "unknown resource", "note": "orderz"}
        with pytest.raises(ProtocolError) as exc_info:
            reduce(False, json.dumps(body))
        assert exc_info.value.origin == "server"
        assert exc_info.value.message == "unknown resource"
        assert exc_info.value.note == "orderz"

    def test_error_fields_come_from_response_error_shape(self):
        with pytest.raises(ProtocolError) as exc_info:
            reduce(False, '{"message":"forbidden"}')
        assert exc_info.value.to_response_error() == ResponseError(origin="", message="forbidden")

    def test_error_without_note(self):
        with pytest.raises(ProtocolError) as exc_info:
            reduce(False, '{"origin":"database","message":"constraint violated"}')
        assert exc_info.value.note is None
        assert exc_info.value.to_response_error().origin == "database"

    @pytest.mark.parametrize("ok", [True, False])
    @pytest.mark.parametrize("body", ["", "<html>bad gateway</html>", "{not json"])
    def test_malformed_body(self, ok, body):
        with pytest.raises(ProtocolError) as exc_info:
            reduce(ok, body)
        assert exc_info.value.origin == "client"
        assert exc_info.value.message == "malformed response body"

    @pytest.mark.parametrize("body", [
        {"rows": None},
        {"rows": [None]},
        {"rows": [{"resource": "orders", "data": None}]},
        {"rows": [{"resource": "orders", "data": [], "range": [1]}]},
    ])
    def test_success_body_with_wrong_shape_is_malformed(self, body):
        with pytest.raises(ProtocolError) as exc_info:
            reduce(True, json.dumps(body))
        assert exc_info.value.origin == "client"
        assert exc_info.value.message == "malformed response body"

    def test_non_object_body_is_malformed(self):
        with pytest.raises(ProtocolError, match="malformed response body"):
            reduce(False, "[1, 2]")


class TestDataOnly:
    def test_returns_first_row_data(self):
        response = Response(version="1", root="shop", rows=[Row("orders", ["a", "b", "c"]), Row("other", ["z"])])
        assert data_only(response) == ["a", "b", "c"]

    def test_empty_rows_raise(self):
        with pytest.raises(ProtocolError) as exc_info:
            data_only(Response(version="1", root="shop", rows=[]))
        assert exc_info.value.message == "no rows in response"
        assert exc_info.value.origin == "client"

    def test_empty_first_row_is_not_an_error(self):
        assert data_only(Response(version="1", root="shop", rows=[Row("orders", [])])) == []
