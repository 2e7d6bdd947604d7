import json
from dataclasses import dataclass
from datetime import datetime

import pytest

from adminkit.context import RequestContext
from adminkit.convert import (
    Mode,
    current_time_str,
    ids_from_param,
    ids_from_string,
    round_half,
    string_to_int,
    struct_to_json_str,
)


def test_mode_values():
    assert Mode("dev") is Mode.DEV
    assert str(Mode.PROD) == "prod"
    assert Mode.TEST == "test"


def test_round_half_rounds_up_on_half():
    assert round_half(2.5, 0) == 3.0
    assert round_half(1.234, 2) == 1.23


def test_round_half_keeps_exact_values():
    assert round_half(4.0, 0) == 4.0
    assert round_half(0.5, 1) == 0.5


def test_string_to_int_parses_signed_numbers():
    assert string_to_int("42") == 42
    assert string_to_int("-17") == -17
    assert string_to_int("+8") == 8


@pytest.mark.parametrize("text", ["", " 42", "4 2", "1_000", "abc", "9223372036854775808"])
def test_string_to_int_rejects_invalid(text):
    with pytest.raises(ValueError):
        string_to_int(text)


def test_current_time_str_format():
    text = current_time_str()
    parsed = datetime.strptime(text, "%Y-%m-%d %H:%M:%S")
    assert parsed.strftime("%Y-%m-%d %H:%M:%S") == text


@dataclass
class _Item:
    name: str
    count: int


def test_struct_to_json_str_round_trips():
    item = _Item("box", 3)
    assert json.loads(struct_to_json_str(item)) == {"name": "box", "count": 3}
    assert json.loads(struct_to_json_str({"items": [item]})) == {"items": [{"name": "box", "count": 3}]}


def test_struct_to_json_str_is_compact():
    assert " " not in struct_to_json_str({"a": [1, 2]})


def test_struct_to_json_str_rejects_unserialisable():
    with pytest.raises(TypeError):
        struct_to_json_str({"a": object()})


def test_ids_from_string():
    assert ids_from_string("1,2,3") == [1, 2, 3]


def test_ids_from_string_replaces_bad_ids():
    assert ids_from_string("5,x,6") == [5, 0, 6]


def test_ids_from_param():
    ctx = RequestContext(params={"ids": "4,9"})
    assert ids_from_param("ids", ctx) == [4, 9]