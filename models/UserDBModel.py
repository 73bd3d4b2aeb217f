from sqlalchemy import Column, String, DateTime

from database import Base, RecordMixin, utcnow


class UserDB(RecordMixin, Base):
    """Users mirrored from the external identity provider."""
    __tablename__ = "users"

    # The identity provider owns the id; it is stored as-is
    id = Column(String(255), primary_key=True)
    email = Column(String(255), nullable=False)
    full_name = Column(String(255), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
