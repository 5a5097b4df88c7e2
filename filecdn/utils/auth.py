import secrets
import string

from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

TOKEN_LENGTH = 32
TOKEN_ALPHABET = string.ascii_letters + string.digits


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    # a malformed or unrecognised digest fails closed
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        return False


def burn_verify():
    """Spend the cost of one verification when there is no digest to check."""
    pwd_context.dummy_verify()


def generate_token(length: int = TOKEN_LENGTH) -> str:
    return "".join(secrets.choice(TOKEN_ALPHABET) for _ in range(length))
