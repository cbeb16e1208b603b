"""
Module 01 - Hashing Unit Tests
Tests for hashtree/crypto/hashing.py

Tests:
- Known vectors for sha256, djb2 and sdbm
- combine == hash_bytes(left + right), order sensitive
- Fixed digest size per hasher
- Registry lookup
- to_hex/from_hex round trip and errors
"""
import hashlib

import pytest

from hashtree.crypto.hashing import (
    Djb2Hasher,
    Hasher,
    SdbmHasher,
    Sha256Hasher,
    _Checksum64Hasher,
    available_hashers,
    from_hex,
    get_hasher,
    to_hex,
)
from hashtree.schemas.errors import ErrorCodes, UnknownHasherException


class TestSha256Hasher:
    """Tests for the SHA-256 hasher."""

    def test_known_value(self):
        """hash_bytes matches hashlib for a known input."""
        hasher = Sha256Hasher()

        assert hasher.hash_bytes(b"hello") == hashlib.sha256(b"hello").digest()
        assert hasher.hash_bytes(b"hello").hex() == (
            "2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824"
        )

    def test_empty_bytes(self):
        assert Sha256Hasher().hash_bytes(b"") == hashlib.sha256(b"").digest()

    def test_combine_is_hash_of_concatenation(self):
        hasher = Sha256Hasher()
        left = hasher.hash_bytes(b"left")
        right = hasher.hash_bytes(b"right")

        expected = hashlib.sha256(left + right).digest()

        assert hasher.combine(left, right) == expected


class TestChecksumHashers:
    """Tests for the 64-bit checksum hashers."""

    def test_djb2_known_values(self):
        hasher = Djb2Hasher()

        assert hasher.hash_bytes(b"hello") == bytes.fromhex("000000310f923099")
        assert hasher.hash_bytes(b"world") == bytes.fromhex("0000003110a7356d")

    def test_sdbm_known_values(self):
        hasher = SdbmHasher()

        assert hasher.hash_bytes(b"hello") == bytes.fromhex("66eb1bb328d19932")
        assert hasher.hash_bytes(b"world") == bytes.fromhex("75be975bf7e3aeb2")

    def test_djb2_empty_is_seed(self):
        """djb2 of no bytes is the 5381 seed."""
        assert Djb2Hasher().hash_bytes(b"") == (5381).to_bytes(8, "big")

    def test_sdbm_empty_is_zero(self):
        assert SdbmHasher().hash_bytes(b"") == bytes(8)

    def test_wraps_at_64_bits(self):
        """Long inputs stay within 8 bytes."""
        data = b"x" * 10_000

        assert len(Djb2Hasher().hash_bytes(data)) == 8
        assert len(SdbmHasher().hash_bytes(data)) == 8


class TestCombineContract:
    """Contract shared by every hasher."""

    def test_combine_equals_hash_of_concat(self, any_hasher):
        left = any_hasher.hash_bytes(b"a")
        right = any_hasher.hash_bytes(b"b")

        assert any_hasher.combine(left, right) == any_hasher.hash_bytes(left + right)

    def test_combine_order_matters(self, any_hasher):
        left = any_hasher.hash_bytes(b"a")
        right = any_hasher.hash_bytes(b"b")

        assert any_hasher.combine(left, right) != any_hasher.combine(right, left)

    def test_fixed_digest_size(self, any_hasher):
        digests = [any_hasher.hash_bytes(bytes([i]) * i) for i in range(50)]
        combined = any_hasher.combine(digests[0], digests[1])

        assert all(len(d) == any_hasher.digest_size for d in digests)
        assert len(combined) == any_hasher.digest_size

    def test_deterministic(self, any_hasher):
        assert any_hasher.hash_bytes(b"same") == any_hasher.hash_bytes(b"same")

    def test_satisfies_protocol(self, any_hasher):
        assert isinstance(any_hasher, Hasher)


class TestRegistry:
    """Tests for get_hasher()."""

    def test_available_names(self):
        assert available_hashers() == ["djb2", "sdbm", "sha256"]

    @pytest.mark.parametrize("name,cls", [
        ("sha256", Sha256Hasher),
        ("djb2", Djb2Hasher),
        ("sdbm", SdbmHasher),
        ("SHA256", Sha256Hasher),
    ])
    def test_lookup(self, name, cls):
        assert isinstance(get_hasher(name), cls)

    def test_default_is_sha256(self):
        assert isinstance(get_hasher(), Sha256Hasher)

    def test_unknown_name_raises(self):
        with pytest.raises(UnknownHasherException) as exc_info:
            get_hasher("md5")

        assert exc_info.value.code == ErrorCodes.UNKNOWN_HASHER
        assert exc_info.value.details["name"] == "md5"
        assert "sha256" in exc_info.value.details["available"]


class TestHexEncoding:
    """Tests for to_hex() and from_hex()."""

    def test_to_hex_has_prefix(self):
        assert to_hex(bytes.fromhex("deadbeef")) == "0xdeadbeef"

    def test_round_trip(self):
        digest = Sha256Hasher().hash_bytes(b"round trip")

        assert from_hex(to_hex(digest)) == digest

    def test_missing_prefix_raises(self):
        with pytest.raises(ValueError, match="0x"):
            from_hex("deadbeef")

    def test_odd_length_raises(self):
        with pytest.raises(ValueError, match="even length"):
            from_hex("0xabc")

    def test_invalid_characters_raise(self):
        with pytest.raises(ValueError, match="Invalid hex"):
            from_hex("0xzz")


class TestChecksumBase:
    """The shared checksum base cannot be used on its own."""

    def test_base_is_abstract(self):
        with pytest.raises(TypeError):
            _Checksum64Hasher()

    def test_subclass_must_define_checksum(self):
        class Incomplete(_Checksum64Hasher):
            name = "incomplete"

        with pytest.raises(TypeError):
            Incomplete()
