"""
Timing-safe comparison of credential strings.

`hmac.compare_digest` is constant time only for inputs of equal length, so
both operands are zero-padded to the longer length first. The length check is
folded into the result with a non short-circuiting `&`, which means a
mismatch in length is the only thing the running time can reveal; the
position of the first differing byte cannot.

The length check also keeps "admin" from matching "admin\\x00", which plain
zero-padding alone would accept.
"""

import hmac
from typing import Union

Comparable = Union[str, bytes]


def _to_bytes(value: Comparable) -> bytes:
    if isinstance(value, bytes):
        return value
    return value.encode("utf-8")


def timing_safe_equal(actual: Comparable, expected: Comparable) -> bool:
    """
    Compare two strings (or byte strings) in constant time for a given
    pair of lengths.

    Args:
        actual (str | bytes): Value supplied by the client.
        expected (str | bytes): Reference value from the credential store.

    Returns:
        bool: True only if both values are byte-for-byte identical.
    """
    a = _to_bytes(actual)
    b = _to_bytes(expected)
    width = max(len(a), len(b))
    same_content = hmac.compare_digest(a.ljust(width, b"\0"), b.ljust(width, b"\0"))
    same_length = len(a) == len(b)
    return same_content & same_length
