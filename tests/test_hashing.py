"""Tests for SHA-1 hashing and secret buffers."""

import pytest

from checkpwn.hibp.hashing import Digest, SecretBuffer, sha1_digest

from conftest import QWERTY_SHA1


class TestSha1Digest:
    """Tests for sha1_digest"""

    def test_known_hash(self):
        assert sha1_digest(b"qwerty") == QWERTY_SHA1
        assert sha1_digest("qwerty").hex == QWERTY_SHA1

    @pytest.mark.parametrize("secret", [b"", b"a", b"password123", "pässwörd".encode(), bytes(range(256))])
    def test_format(self, secret):
        """Always 40 uppercase hex characters"""
        digest = sha1_digest(secret)
        assert len(digest) == 40
        assert digest.hex == digest.hex.upper()
        int(digest.hex, 16)

    def test_deterministic(self):
        assert sha1_digest(b"mypassword") == sha1_digest(b"mypassword")
        assert sha1_digest(b"password1") != sha1_digest(b"password2")

    def test_empty_input(self):
        assert sha1_digest(b"") == "DA39A3EE5E6B4B0D3255BFEF95601890AFD80709"

    def test_prefix_and_suffix(self):
        digest = sha1_digest(b"qwerty")
        assert digest.prefix == "B1B37"
        assert digest.suffix == QWERTY_SHA1[5:]
        assert digest[5:] == QWERTY_SHA1[5:]

    def test_accepts_secret_buffer(self):
        with SecretBuffer("qwerty") as secret:
            assert sha1_digest(secret) == QWERTY_SHA1

    def test_lowercase_comparison(self):
        assert sha1_digest(b"qwerty") == QWERTY_SHA1.lower()

    def test_repr_hides_suffix(self):
        digest = sha1_digest(b"qwerty")
        assert QWERTY_SHA1[5:] not in repr(digest)


class TestScrubbing:
    """Buffers are zeroed when their block exits"""

    def test_digest_cleared_on_exit(self):
        with sha1_digest(b"qwerty") as digest:
            assert digest.prefix == "B1B37"
        assert digest._buf == bytearray(40)

    def test_digest_cleared_on_error(self):
        with pytest.raises(RuntimeError):
            with sha1_digest(b"qwerty") as digest:
                raise RuntimeError("boom")
        assert not any(digest._buf)

    def test_secret_cleared_on_exit(self):
        with SecretBuffer("hunter2") as secret:
            assert bytes(secret.data) == b"hunter2"
        assert secret.data == bytearray(7)

    def test_secret_repr_redacted(self):
        assert "hunter2" not in repr(SecretBuffer("hunter2"))

    def test_digest_from_lowercase(self):
        assert Digest(QWERTY_SHA1.lower()).hex == QWERTY_SHA1
