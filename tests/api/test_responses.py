"""Response & Body Helpers — JSON writer and tolerant body parsing."""

import json

import pytest
from starlette.requests import Request

from groupchat.api.responses import json_response, read_json_body


def _request(body: bytes) -> Request:
    async def receive():
        return {"type": "http.request", "body": body, "more_body": False}

    scope = {
        "type": "http", "method": "POST", "path": "/groups",
        "headers": [(b"content-type", b"application/json")], "query_string": b"",
    }
    return Request(scope, receive)


def test_json_response_sets_status_and_content_type():
    res = json_response(201, {"id": 1})
    assert res.status_code == 201
    assert res.media_type == "application/json"
    assert json.loads(res.body) == {"id": 1}


@pytest.mark.parametrize("body", [
    b"", b"{broken", b"[1, 2]", b'"text"', b"null", b"\xff\xfe",
    b"[" * 200000, b'{"a": ' * 200000,
])
async def test_unusable_bodies_become_empty_object(body):
    assert await read_json_body(_request(body)) == {}


async def test_object_body_is_returned():
    assert await read_json_body(_request(b'{"name": "Room"}')) == {"name": "Room"}
