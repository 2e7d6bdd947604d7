import time
from http import HTTPStatus

import pytest

from adminkit.api_exception import (
    APIException,
    auth_error,
    not_found,
    parameter_error,
    response_json,
    server_error,
    unknown_error,
)


def test_server_error():
    exc = server_error()
    assert exc.code == HTTPStatus.INTERNAL_SERVER_ERROR
    assert exc.msg == HTTPStatus.INTERNAL_SERVER_ERROR.phrase
    assert exc.success is False
    assert exc.result is None


def test_not_found():
    exc = not_found()
    assert (exc.code, exc.msg) == (HTTPStatus.NOT_FOUND, HTTPStatus.NOT_FOUND.phrase)


@pytest.mark.parametrize(
    "factory, status",
    [
        (unknown_error, HTTPStatus.FORBIDDEN),
        (parameter_error, HTTPStatus.BAD_REQUEST),
        (auth_error, HTTPStatus.BAD_REQUEST),
    ],
)
def test_message_factories(factory, status):
    exc = factory("bad input")
    assert exc.code == status
    assert exc.msg == "bad input"
    assert exc.success is False


def test_response_json_carries_data():
    exc = response_json("fine", {"a": 1}, True)
    assert exc.to_dict()["result"] == {"a": 1}
    assert exc.success is True
    assert exc.code == HTTPStatus.OK


def test_raises_with_message():
    exc = parameter_error("missing id")
    assert str(exc) == "missing id"
    with pytest.raises(APIException, match="missing id"):
        raise exc


def test_timestamp_is_now():
    before = int(time.time())
    exc = not_found()
    after = int(time.time())
    assert before <= exc.timestamp <= after


def test_to_dict_keys():
    assert set(server_error().to_dict()) == {"code", "success", "msg", "timestamp", "result"}