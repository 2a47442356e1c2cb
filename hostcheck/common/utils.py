"""Common helpers: identity string lengths, strcasecmp-style compare, SHA-256."""

import hashlib
from typing import Union

from hostcheck.common.models import IdentityString


def sha256_hex(data: Union[bytes, str]) -> str:
    """
    Compute SHA-256 and return hex string.
    Accepts bytes or str (utf-8).
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    return hashlib.sha256(data).hexdigest()


def effective_length(raw: bytes) -> int:
    """Length up to (not including) the first NUL, or the full length if none."""
    pos = raw.find(b"\x00")
    return len(raw) if pos < 0 else pos


def make_identity(value: Union[bytes, str], source: str) -> IdentityString:
    """
    Wrap a decoded certificate string value.

    str values are re-encoded as UTF-8 so the lengths are byte counts,
    the same unit the ASN.1 string length is expressed in.
    """
    raw = value.encode("utf-8") if isinstance(value, str) else bytes(value)
    return IdentityString(
        raw=raw,
        declared_length=len(raw),
        effective_length=effective_length(raw),
        source=source,
    )


def ascii_casefold_equal(a: bytes, b: bytes) -> bool:
    """
    Byte-for-byte comparison that ignores ASCII case only (like strcasecmp).

    bytes.lower() leaves non-ASCII bytes untouched.
    """
    return len(a) == len(b) and a.lower() == b.lower()


def hostname_matches(hostname: str, identity: IdentityString) -> bool:
    return ascii_casefold_equal(hostname.encode("utf-8"), identity.raw)
