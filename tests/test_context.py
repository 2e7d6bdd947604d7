import uuid

import pytest

from adminkit.context import (
    TRAFFIC_KEY,
    RequestContext,
    generate_msg_id,
    get_orm,
)


def test_header_lookup_ignores_case():
    ctx = RequestContext(headers={"X-Request-Id": "abc"})
    assert ctx.get_header("x-request-id") == "abc"
    assert ctx.get_header("Accept") == ""


def test_set_header_and_remove_with_empty_value():
    ctx = RequestContext()
    ctx.set_header("X-Test", "value")
    assert ctx.response_headers["X-Test"] == "value"
    ctx.set_header("X-Test", "")
    assert "X-Test" not in ctx.response_headers


def test_generate_msg_id_reuses_existing_header():
    ctx = RequestContext(headers={TRAFFIC_KEY: "abc"})
    assert generate_msg_id(ctx) == "abc"
    assert TRAFFIC_KEY not in ctx.response_headers


def test_generate_msg_id_creates_uuid_and_echoes_it():
    ctx = RequestContext()
    request_id = generate_msg_id(ctx)
    assert str(uuid.UUID(request_id)) == request_id
    assert ctx.response_headers[TRAFFIC_KEY] == request_id


def test_values_round_trip():
    ctx = RequestContext()
    ctx.set("key", [1, 2])
    assert ctx.get("key") == [1, 2]
    assert "key" in ctx
    assert ctx.get("missing") is None
    assert "missing" not in ctx


def test_param_lookup():
    ctx = RequestContext(params={"id": "7"})
    assert ctx.param("id") == "7"
    assert ctx.param("channel") == ""


def test_abort_records_response():
    ctx = RequestContext()
    ctx.abort_with_status_json(200, {"code": 200})
    assert ctx.aborted is True
    assert ctx.status == 200
    assert ctx.body == {"code": 200}


def test_get_orm_returns_stored_handle():
    ctx = RequestContext()
    handle = object()
    ctx.set("db", handle)
    assert get_orm(ctx) is handle


def test_get_orm_without_handle_raises():
    with pytest.raises(LookupError, match="db connect not exist"):
        get_orm(RequestContext())