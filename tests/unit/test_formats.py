"""Unit tests for stored hash format detection and password encoding."""

import pytest

from credhash.hashing.formats import (
    ARGON2ID_PREFIX,
    HashFormat,
    detect_format,
    encode_password,
)


class TestDetectFormat:
    """Tests for detect_format()."""

    def test_argon2id_prefix(self, interactive_hash):
        assert detect_format(interactive_hash) is HashFormat.ARGON2ID

    def test_bare_prefix_is_argon2id(self):
        assert detect_format(ARGON2ID_PREFIX) is HashFormat.ARGON2ID

    def test_hex_digest_is_legacy(self, legacy_hash):
        assert detect_format(legacy_hash) is HashFormat.LEGACY_SHA256

    @pytest.mark.parametrize(
        "stored",
        [
            "",
            "$argon2i$v=19$m=65536,t=2,p=1$c2FsdHNhbHQ$aGFzaA",
            "$argon2d$v=19$m=65536,t=2,p=1$c2FsdHNhbHQ$aGFzaA",
            "$ARGON2ID$v=19$m=65536,t=2,p=1$c2FsdHNhbHQ$aGFzaA",
            " $argon2id$v=19$m=65536,t=2,p=1$c2FsdHNhbHQ$aGFzaA",
            "argon2id$",
        ],
    )
    def test_anything_else_is_legacy(self, stored):
        assert detect_format(stored) is HashFormat.LEGACY_SHA256


class TestEncodePassword:
    """Tests for encode_password()."""

    def test_text_is_utf8(self):
        assert encode_password("pässwörd") == "pässwörd".encode("utf-8")

    def test_byte_length_not_char_length(self):
        # 4 characters, 10 bytes
        assert len(encode_password("é€🔑a")) == 10

    def test_bytes_pass_through(self):
        assert encode_password(b"\x00\xffraw") == b"\x00\xffraw"

    def test_bytearray_becomes_bytes(self):
        result = encode_password(bytearray(b"secret"))
        assert isinstance(result, bytes)
        assert result == b"secret"

    def test_memoryview_becomes_bytes(self):
        assert encode_password(memoryview(b"secret")) == b"secret"

    @pytest.mark.parametrize("password", [5, 0, 3.14, None, ["p", "w"]])
    def test_non_text_non_buffer_rejected(self, password):
        # bytes(5) would silently produce five zero bytes
        with pytest.raises(TypeError):
            encode_password(password)
