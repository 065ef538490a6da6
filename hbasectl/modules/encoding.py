"""
Data block encodings understood by HBase 2.0.
"""
from enum import Enum
from typing import Optional, Union


class DataBlockEncoding(Enum):
    """Encodings a 2.0 region server can read.

    Values are the on-disk ids. PREFIX_TREE (id 6) was removed in 2.0.
    """
    NONE = 0
    PREFIX = 2
    DIFF = 3
    FAST_DIFF = 4
    ROW_INDEX_V1 = 7


# Column families without an explicit encoding use this one
DEFAULT_ENCODING = DataBlockEncoding.NONE


def parse_encoding(value: Optional[Union[str, bytes]]) -> Optional[DataBlockEncoding]:
    """
    Resolve a raw DATA_BLOCK_ENCODING attribute value.

    Lookup is by exact (case-sensitive) name, as the region server does it.

    Args:
        value: Attribute value as text or raw bytes; None means unset

    Returns:
        The matching encoding, DEFAULT_ENCODING for an unset value, or None
        when the value is not a known encoding
    """
    if value is None:
        return DEFAULT_ENCODING
    if isinstance(value, bytes):
        try:
            value = value.decode("utf-8")
        except UnicodeDecodeError:
            return None
    return DataBlockEncoding.__members__.get(value)
