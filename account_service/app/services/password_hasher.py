"""
Password Hasher

Salted Argon2id hashing via argon2-cffi.

Stored values are the self-describing PHC strings argon2-cffi produces
(``$argon2id$v=19$m=...,t=...,p=...$<salt>$<hash>``), so the cost
parameters travel with each hash.
"""

import secrets

from argon2 import PasswordHasher as Argon2Hasher
from argon2.exceptions import InvalidHashError, VerificationError

# argon2-cffi defaults (RFC 9106 low-memory profile: 64 MiB, 3 passes)
TIME_COST = 3
MEMORY_COST = 65536
PARALLELISM = 4


class PasswordHasher:
    """
    Credential hasher.

    Business Rules:
    - Fresh random salt per hash, so equal passwords never share a hash
    - Memory-hard key derivation (Argon2id)
    - Verification compares digests in constant time (done by libargon2)
    - Malformed stored hashes fail verification instead of raising
    """

    def __init__(
        self,
        time_cost: int = TIME_COST,
        memory_cost: int = MEMORY_COST,
        parallelism: int = PARALLELISM,
    ):
        self._argon2 = Argon2Hasher(
            time_cost=time_cost, memory_cost=memory_cost, parallelism=parallelism
        )
        self._dummy_hash = None

    def hash(self, password: str) -> str:
        return self._argon2.hash(password)

    def verify(self, supplied: str, stored: str) -> bool:
        """
        Check a plaintext password against a stored hash.

        Args:
            supplied: Plain text password from the caller
            stored: Value produced by hash()

        Returns:
            True on match; False on mismatch or malformed stored value
        """
        if not stored:
            return False

        try:
            return self._argon2.verify(stored, supplied)
        except (VerificationError, InvalidHashError):
            return False

    def verify_dummy(self, supplied: str) -> bool:
        """Burn one verification so unknown users cost as much as known ones"""
        if self._dummy_hash is None:
            self._dummy_hash = self.hash(secrets.token_hex(16))
        self.verify(supplied, self._dummy_hash)
        return False
