import pytest

from adminkit import user
from adminkit.claims import MapClaims
from adminkit.context import RequestContext


def _ctx(claims=None):
    ctx = RequestContext(method="GET", path="/api/v1/user")
    if claims is not None:
        ctx.set(user.JWT_PAYLOAD_KEY, claims)
    return ctx


def test_extract_claims_without_payload_is_empty():
    claims = user.extract_claims(_ctx())
    assert isinstance(claims, MapClaims)
    assert claims == {}


def test_extract_claims_accepts_plain_mapping():
    claims = user.extract_claims(_ctx({"identity": 5}))
    assert isinstance(claims, MapClaims)
    assert claims.identity() == 5


def test_extract_claims_rejects_non_mapping():
    with pytest.raises(TypeError):
        user.extract_claims(_ctx(["not", "claims"]))


def test_get_returns_value_or_none():
    ctx = _ctx(MapClaims({"nice": "alice"}))
    assert user.get(ctx, "nice") == "alice"
    assert user.get(ctx, "missing") is None


def test_get_user_id_from_float_and_string():
    assert user.get_user_id(_ctx(MapClaims({"identity": 42.0}))) == 42
    assert user.get_user_id(_ctx(MapClaims({"identity": "7"}))) == 7


def test_get_user_id_falls_back_to_zero():
    assert user.get_user_id(_ctx()) == 0
    assert user.get_user_id(_ctx(MapClaims({"identity": "abc"}))) == 0


def test_get_user_id_str_formats_numbers():
    assert user.get_user_id_str(_ctx(MapClaims({"identity": 42.0}))) == "42"
    assert user.get_user_id_str(_ctx()) == ""


def test_string_claims():
    ctx = _ctx(MapClaims({"nice": "alice", "rolekey": "admin", "deptkey": "ops"}))
    assert user.get_user_name(ctx) == "alice"
    assert user.get_role_name(ctx) == "admin"
    assert user.get_dept_name(ctx) == "ops"


def test_role_and_dept_ids():
    ctx = _ctx(MapClaims({"roleid": 3.0, "deptid": "9"}))
    assert user.get_role_id(ctx) == 3
    assert user.get_dept_id(ctx) == 9


def test_role_and_dept_ids_fall_back_to_zero():
    ctx = _ctx(MapClaims({"roleid": [1], "deptid": "x"}))
    assert user.get_role_id(ctx) == 0
    assert user.get_dept_id(ctx) == 0
    assert user.get_role_id(_ctx()) == 0