"""Tests for the Crockford and z-base-32 codecs."""

import pytest

from pubky_app_specs.domain.codec import Alphabet, decode, encode


class TestCrockford:
    def test_encode_empty(self) -> None:
        assert encode(b"") == ""

    def test_encode_zero_byte(self) -> None:
        assert encode(b"\x00") == "00"

    def test_eight_zero_bytes_are_thirteen_chars(self) -> None:
        assert encode(bytes(8)) == "0" * 13

    def test_encode_uses_crockford_symbols(self) -> None:
        encoded = encode(bytes(range(256)))
        assert set(encoded) <= set("0123456789ABCDEFGHJKMNPQRSTVWXYZ")

    def test_decode_inverts_encode(self) -> None:
        data = b"\x01\x02\xfe\xff pubky"
        assert decode(encode(data)) == data

    def test_decode_is_case_insensitive(self) -> None:
        data = b"\x9a\xbc\xde"
        assert decode(encode(data).lower()) == data

    def test_decode_maps_ambiguous_letters(self) -> None:
        assert decode("OO") == b"\x00"
        assert decode("oo") == b"\x00"
        assert decode("I0") == decode("10")
        assert decode("L0") == decode("10")

    def test_decode_rejects_unknown_symbol(self) -> None:
        with pytest.raises(ValueError, match="symbol"):
            decode("UU")

    def test_decode_rejects_non_ascii(self) -> None:
        with pytest.raises(ValueError):
            decode("é0")

    def test_decode_rejects_impossible_length(self) -> None:
        with pytest.raises(ValueError, match="length"):
            decode("0")


class TestZBase32:
    def test_encode_zero_byte(self) -> None:
        assert encode(b"\x00", Alphabet.ZBASE32) == "yy"

    def test_decode_is_case_insensitive(self) -> None:
        assert decode("YY", Alphabet.ZBASE32) == b"\x00"

    def test_thirty_two_bytes_are_fifty_two_chars(self) -> None:
        assert len(encode(bytes(32), Alphabet.ZBASE32)) == 52

    def test_rejects_crockford_only_symbols(self) -> None:
        with pytest.raises(ValueError):
            decode("00", Alphabet.ZBASE32)
