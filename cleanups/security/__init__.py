"""Security: password hashing. No HTTP, no token issuance."""

from cleanups.security.passwords import hash_password, verify_password

__all__ = ["hash_password", "verify_password"]
