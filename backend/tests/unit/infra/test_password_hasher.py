"""Tests for the werkzeug-backed password hasher."""

from __future__ import annotations

import pytest
from fintrack.infra.security.password_hasher import WerkzeugPasswordHasher


@pytest.fixture()
def hasher() -> WerkzeugPasswordHasher:
    return WerkzeugPasswordHasher(rounds=1000)


class TestWerkzeugPasswordHasher:
    def test_hash_never_returns_plaintext(self, hasher):
        digest = hasher.hash("s3cret!")
        assert digest != "s3cret!"
        assert "s3cret!" not in digest
        assert digest.startswith("pbkdf2:sha256:1000$")

    def test_hash_is_salted(self, hasher):
        """Hashing the same input twice yields different digests."""
        assert hasher.hash("same-password") != hasher.hash("same-password")

    def test_compare_accepts_matching_password(self, hasher):
        digest = hasher.hash("s3cret!")
        assert hasher.compare("s3cret!", digest) is True

    def test_compare_rejects_other_password(self, hasher):
        digest = hasher.hash("s3cret!")
        assert hasher.compare("S3cret!", digest) is False
        assert hasher.compare("", digest) is False

    def test_compare_reads_work_factor_from_digest(self, hasher):
        """A digest produced with another rounds value still verifies."""
        old = WerkzeugPasswordHasher(rounds=500).hash("legacy")
        assert hasher.compare("legacy", old) is True

    def test_compare_raises_on_unknown_hash_method(self, hasher):
        with pytest.raises(ValueError):
            hasher.compare("whatever", "bogus$salt$digest")

    @pytest.mark.parametrize("rounds", [0, -5])
    def test_rejects_non_positive_rounds(self, rounds):
        with pytest.raises(ValueError, match="rounds"):
            WerkzeugPasswordHasher(rounds=rounds)
