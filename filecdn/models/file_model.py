import enum

from sqlalchemy import Column, String, ForeignKey, Enum, CheckConstraint
from sqlalchemy.orm import relationship

from filecdn.database import Base
from filecdn.models.user_model import UTCDateTime, utcnow


class Visibility(str, enum.Enum):
    PRIVATE = "private"
    PUBLIC = "public"


class FileRecord(Base):
    __tablename__ = "files"
    __table_args__ = (
        # public_url is set exactly when the file is public
        CheckConstraint(
            "(visibility = 'private' AND public_url IS NULL) OR "
            "(visibility = 'public' AND public_url IS NOT NULL)",
            name="ck_files_public_url_matches_visibility",
        ),
    )

    id = Column(String(36), primary_key=True)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    filename = Column(String, nullable=False)
    storage_path = Column(String, nullable=False, unique=True)
    visibility = Column(
        Enum(Visibility, values_callable=lambda members: [member.value for member in members],
             native_enum=False, create_constraint=False, length=16),
        nullable=False,
        default=Visibility.PRIVATE,
    )
    public_url = Column(String, nullable=True)
    created_at = Column(UTCDateTime, nullable=False, default=utcnow)
    updated_at = Column(UTCDateTime, nullable=False, default=utcnow, onupdate=utcnow)

    user = relationship("User", back_populates="files")

    def publish(self, public_url: str):
        self.visibility = Visibility.PUBLIC
        self.public_url = public_url
        self.updated_at = utcnow()
