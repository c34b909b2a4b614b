"""Password hashing utilities (bcrypt)"""
import bcrypt


def hash_password(password: str, rounds: int = 12) -> str:
    """Hash a password with a fresh bcrypt salt"""
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plaintext password against a stored bcrypt hash"""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Malformed stored hash, or a password bcrypt refuses (over 72 bytes)
        return False
