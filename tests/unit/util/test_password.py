"""Unit tests for password hashing."""

from board.util.password import hash_password, verify_password


def test_hash_verifies_only_the_original_password():
    """The hash accepts the password it was made from and nothing else."""
    hashed = hash_password("secret123")

    assert hashed != "secret123"
    assert verify_password("secret123", hashed)
    assert not verify_password("secret124", hashed)


def test_unknown_hash_format_does_not_verify():
    """A malformed stored hash is a failed check, not an error."""
    assert not verify_password("secret123", "plain-text")
