import pytest

from hbasectl.modules.encoding import DEFAULT_ENCODING, DataBlockEncoding, parse_encoding


@pytest.mark.parametrize("value", ["NONE", "PREFIX", "DIFF", "FAST_DIFF", "ROW_INDEX_V1"])
def test_supported_encodings_resolve(value):
    assert parse_encoding(value) is DataBlockEncoding[value]


def test_bytes_are_decoded():
    assert parse_encoding(b"FAST_DIFF") is DataBlockEncoding.FAST_DIFF


@pytest.mark.parametrize("value", ["PREFIX_TREE", "", "fast_diff", " NONE", "GZ", b"\xff\xfe"])
def test_unknown_encodings_do_not_resolve(value):
    assert parse_encoding(value) is None


def test_unset_value_falls_back_to_default():
    assert parse_encoding(None) is DEFAULT_ENCODING is DataBlockEncoding.NONE


def test_prefix_tree_is_not_a_member():
    assert "PREFIX_TREE" not in DataBlockEncoding.__members__
