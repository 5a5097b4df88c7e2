import logging
from typing import Optional

from sqlalchemy.orm import Session

from filecdn.database import Catalog
from filecdn.errors import Unauthorized
from filecdn.models.auth_token_model import AuthToken
from filecdn.utils.auth import generate_token

logger = logging.getLogger(__name__)


def add_token(db: Session, user_id: str) -> str:
    """Insert a new token for ``user_id`` inside an already open catalog session."""
    token = generate_token()
    db.add(AuthToken(token=token, user_id=user_id))
    db.flush()
    return token


def issue_token(catalog: Catalog, user_id: str) -> str:
    with catalog.session() as db:
        return add_token(db, user_id)


def authenticate(catalog: Catalog, token: Optional[str]) -> str:
    # missing, empty and unknown tokens all look the same to the caller
    if not token:
        raise Unauthorized()

    with catalog.session() as db:
        user_id = db.query(AuthToken.user_id).filter(AuthToken.token == token).scalar()

    if user_id is None:
        logger.warning("Rejected unknown bearer token")
        raise Unauthorized()
    return user_id
