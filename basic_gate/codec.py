"""
Basic-Auth header codec.

Only decoding is used by the engine. Decoding is total: malformed input never
raises, it just produces credentials that fail verification later on.
"""

import base64
import binascii

from .credentials.base import Credential


def decode_basic(header_value: str) -> Credential:
    """
    Parse `<scheme> <base64(username:password)>` into a Credential.

    Notes:
        - The scheme is not validated here; the engine checks it first.
        - A missing token or undecodable base64 yields empty credentials.
        - Without a ":" the whole decoded text becomes the username and
          the password is empty.
    """
    _, _, token = header_value.partition(" ")
    token = token.strip()
    if not token:
        return Credential(username="", password="")

    try:
        # Tolerate stripped padding, as most clients and servers do
        raw = base64.b64decode(token + "=" * (-len(token) % 4))
    except (binascii.Error, ValueError):
        return Credential(username="", password="")

    decoded = raw.decode("utf-8", errors="replace")
    username, _, password = decoded.partition(":")
    return Credential(username=username, password=password)


def encode_basic(username: str, password: str) -> str:
    """Build an `Authorization` header value for the given pair."""
    token = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
    return f"Basic {token}"
