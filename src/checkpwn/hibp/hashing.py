"""
SHA-1 hashing for the Pwned Passwords range API.

The password and its digest live in mutable buffers that are zeroed when
their ``with`` block exits, whatever the exit path.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import hashlib
import string

PREFIX_LENGTH = 5
DIGEST_LENGTH = 40
HEX_DIGITS = frozenset(string.hexdigits)


def _wipe(buffer: bytearray) -> None:
    for i in range(len(buffer)):
        buffer[i] = 0


class SecretBuffer:
    """Owns the raw bytes of a secret and zeroes them on exit.

    Example:
        with SecretBuffer(password) as secret:
            ...
    """

    __slots__ = ("_buf",)

    def __init__(self, secret: str | bytes | bytearray):
        if isinstance(secret, str):
            secret = secret.encode("utf-8")
        self._buf = bytearray(secret)

    @property
    def data(self) -> bytearray:
        return self._buf

    def clear(self) -> None:
        _wipe(self._buf)

    def __enter__(self) -> "SecretBuffer":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.clear()

    def __repr__(self) -> str:
        return "SecretBuffer(********)"


class Digest:
    """Uppercase hexadecimal SHA-1 digest of a secret.

    Compares equal to its hex string. Only ``prefix`` is ever meant to
    leave the machine; ``suffix`` is for local matching.
    """

    __slots__ = ("_buf",)

    def __init__(self, hexdigest: str | bytes | bytearray):
        if isinstance(hexdigest, str):
            hexdigest = hexdigest.encode("ascii")
        self._buf = bytearray(hexdigest.upper())

    @property
    def hex(self) -> str:
        return self._buf.decode("ascii")

    @property
    def prefix(self) -> str:
        """First 5 characters, the only part sent to the API."""
        return self._buf[:PREFIX_LENGTH].decode("ascii")

    @property
    def suffix(self) -> str:
        return self._buf[PREFIX_LENGTH:].decode("ascii")

    def clear(self) -> None:
        _wipe(self._buf)

    def __enter__(self) -> "Digest":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.clear()

    def __getitem__(self, key) -> str:
        return self.hex[key]

    def __len__(self) -> int:
        return len(self._buf)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Digest):
            return self._buf == other._buf
        if isinstance(other, str):
            return self.hex == other.upper()
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        # Never render the suffix
        return f"Digest({self.prefix}...)"


def sha1_digest(secret: str | bytes | bytearray | SecretBuffer) -> Digest:
    """Compute the uppercase SHA-1 digest of a secret.

    Args:
        secret: Bytes to hash (strings are UTF-8 encoded)

    Returns:
        Digest of 40 uppercase hex characters
    """
    if isinstance(secret, SecretBuffer):
        secret = secret.data
    elif isinstance(secret, str):
        secret = secret.encode("utf-8")

    sha = hashlib.sha1(secret)
    return Digest(sha.hexdigest())
