"""
Password Hasher

One-way bcrypt hashing of plaintext secrets.
"""

import bcrypt

from config import ApplicationConfig


class PasswordHasher:
    """
    Bcrypt credential hasher.

    Each hash embeds its own random salt and cost factor, so verify() needs
    only the plaintext and the stored digest.
    """

    def __init__(self, rounds: int = ApplicationConfig.BCRYPT_ROUNDS):
        self.rounds = rounds

    def hash(self, plaintext: str) -> str:
        """
        Hash a plaintext secret.

        Raises:
            ValueError: plaintext longer than 72 bytes (bcrypt limit)
        """
        password_hash = bcrypt.hashpw(
            plaintext.encode("utf-8"), bcrypt.gensalt(self.rounds)
        )
        return password_hash.decode("utf-8")

    def verify(self, plaintext: str, digest: str) -> bool:
        """Check plaintext against a stored digest; False for malformed digests"""
        if not plaintext or not digest:
            return False
        try:
            return bcrypt.checkpw(plaintext.encode("utf-8"), digest.encode("utf-8"))
        except (ValueError, TypeError):
            return False
