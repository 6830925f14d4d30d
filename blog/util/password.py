"""Password hashing for registered accounts."""

from passlib.context import CryptContext

# argon2 for every new hash; other schemes would only be kept to verify
pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, hashed: str) -> bool:
    """Check a plain password against a stored hash."""
    return pwd_context.verify(password, hashed)
