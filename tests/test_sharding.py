import pytest

from adminkit.sharding import crc8_hash, crc16_hash, crc32_hash, dynamic_table


def test_empty_string_is_shard_zero():
    assert crc32_hash("") == "0"


def test_standard_check_value():
    # CRC-32 of "123456789" is 0xCBF43926.
    assert crc32_hash("123456789") == "6"


@pytest.mark.parametrize("src", ["a", "user-1", "小圈圈", "hello world"])
def test_buckets_are_consistent(src):
    assert int(crc16_hash(src)) == int(crc32_hash(src)) % 16
    assert int(crc8_hash(src)) == int(crc32_hash(src)) % 8
    assert 0 <= int(crc32_hash(src)) < 32


class _FakeDB:
    def __init__(self):
        self.name = None

    def table(self, name):
        self.name = name
        return self


def test_dynamic_table_sets_table_name():
    db = _FakeDB()
    scope = dynamic_table(crc8_hash, "test", "abc")
    assert scope(db) is db
    assert db.name == "test_" + crc8_hash("abc")