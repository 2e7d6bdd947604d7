import pytest

from adminkit.claims import MapClaims


def test_exp_from_int():
    assert MapClaims({"exp": 1700000000}).exp() == 1700000000


def test_orig_iat_from_string():
    assert MapClaims({"orig_iat": "1600000000"}).orig_iat() == 1600000000


def test_identity_from_float_truncates():
    assert MapClaims({"identity": 12.9}).identity() == 12


def test_int_from_string():
    assert MapClaims({"roleid": "42"}).as_int("roleid") == 42


def test_missing_key_raises():
    with pytest.raises(LookupError):
        MapClaims({}).as_int64("exp")


def test_none_value_raises():
    with pytest.raises(LookupError):
        MapClaims({"exp": None}).exp()


def test_invalid_string_raises():
    with pytest.raises(ValueError):
        MapClaims({"exp": "12a"}).exp()


@pytest.mark.parametrize("value", [True, [1], {"a": 1}])
def test_unsupported_type_raises(value):
    with pytest.raises(TypeError):
        MapClaims({"k": value}).as_int64("k")


def test_uint64_wraps_negative():
    claims = MapClaims({"k": "-1"})
    assert claims.as_uint64("k") == 2**64 + claims.as_int64("k")


def test_uint64_positive_matches_int64():
    claims = MapClaims({"k": "77"})
    assert claims.as_uint64("k") == claims.as_int64("k")


def test_as_string_plain_string():
    assert MapClaims({"nice": "admin"}).as_string("nice") == "admin"


def test_as_string_missing_is_empty():
    assert MapClaims({}).as_string("nice") == ""


def test_as_string_unsupported_is_empty():
    assert MapClaims({"nice": [1, 2]}).as_string("nice") == ""


def test_as_string_whole_float_has_no_fraction():
    assert MapClaims({"identity": 3.0}).as_string("identity") == "3"


def test_as_string_large_float_uses_exponent():
    assert MapClaims({"identity": 1e21}).as_string("identity") == "1e+21"


def test_as_string_int_round_trips():
    claims = MapClaims({"identity": 9876})
    assert int(claims.as_string("identity")) == 9876


def test_as_string_fractional_float_round_trips():
    claims = MapClaims({"v": 0.25})
    assert float(claims.as_string("v")) == 0.25