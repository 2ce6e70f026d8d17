"""
API key generation and hashing.

Keys are looked up by digest only; neither the key nor its digest is ever
written to logs or error messages.
"""

import hashlib
import secrets
import string

API_KEY_PREFIX_LIVE = "sk_live_"
API_KEY_PREFIX_TEST = "sk_test_"
API_KEY_RANDOM_LENGTH = 32

_ALPHABET = string.ascii_letters + string.digits


def generate_api_key(prefix: str = API_KEY_PREFIX_LIVE) -> str:
    """Generate a new API key: prefix + 32 random alphanumerics"""
    return prefix + "".join(secrets.choice(_ALPHABET) for _ in range(API_KEY_RANDOM_LENGTH))


def hash_api_key(api_key: str, salt: str = "") -> str:
    """SHA-256 hex digest of salt + key"""
    return hashlib.sha256(f"{salt}{api_key}".encode("utf-8")).hexdigest()
