import bcrypt
import os
from dotenv import load_dotenv

load_dotenv()

BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "12"))


class PasswordHasher:
    """One-way bcrypt hashing for user passwords."""

    def __init__(self, rounds: int = BCRYPT_ROUNDS):
        self.rounds = rounds

    def hash(self, password: str) -> str:
        hashed_password = bcrypt.hashpw(password.encode('utf-8'), bcrypt.gensalt(rounds=self.rounds))
        return hashed_password.decode('utf-8')

    def verify(self, password: str, hashed_password: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode('utf-8'), hashed_password.encode('utf-8'))
        except ValueError:
            # Stored value is not a bcrypt hash
            return False


password_hasher = PasswordHasher()
