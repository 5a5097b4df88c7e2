import logging

from sqlalchemy.exc import IntegrityError

from filecdn.database import Catalog
from filecdn.errors import Conflict, Unauthorized
from filecdn.models.user_model import User
from filecdn.services.token_authority import add_token, issue_token
from filecdn.utils.auth import hash_password, verify_password, burn_verify

logger = logging.getLogger(__name__)


def register(catalog: Catalog, username: str, email: str, password: str) -> str:
    """Create a user and its first token in one transaction; return the token."""
    password_hash = hash_password(password)

    with catalog.session() as db:
        new_user = User(username=username, email=email, password_hash=password_hash)
        db.add(new_user)
        try:
            db.flush()
        except IntegrityError as error:
            raise Conflict("User already exists") from error
        token = add_token(db, new_user.id)

    logger.info("Registered user %s", new_user.id)
    return token


def login(catalog: Catalog, username: str, password: str) -> str:
    with catalog.session() as db:
        row = db.query(User.id, User.password_hash).filter(User.username == username).first()

    # unknown user and wrong password are reported identically
    if row is None:
        burn_verify()
        logger.warning("Login failed")
        raise Unauthorized("Invalid credentials")

    user_id, password_hash = row
    if not verify_password(password, password_hash):
        logger.warning("Login failed")
        raise Unauthorized("Invalid credentials")

    token = issue_token(catalog, user_id)
    logger.info("User %s logged in", user_id)
    return token
