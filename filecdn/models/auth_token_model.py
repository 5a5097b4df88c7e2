from sqlalchemy import Column, String, ForeignKey
from sqlalchemy.orm import relationship

from filecdn.database import Base
from filecdn.models.user_model import UTCDateTime, utcnow


class AuthToken(Base):
    __tablename__ = "auth_tokens"

    token = Column(String, primary_key=True)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    created_at = Column(UTCDateTime, nullable=False, default=utcnow)

    user = relationship("User", back_populates="auth_tokens")
