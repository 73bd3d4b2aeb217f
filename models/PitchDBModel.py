from sqlalchemy import Column, String, Text, Boolean, DateTime

from database import Base, JSONType, RecordMixin, new_id, utcnow


class PitchDB(RecordMixin, Base):
    __tablename__ = "pitch_assistant"

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(255), nullable=False, index=True)
    # Where the idea came from in the UI ("validated", "custom", ...)
    idea_source = Column(String(50), nullable=True)
    idea_id = Column(String(36), nullable=True)
    idea_title = Column(String(500), nullable=False)
    idea_description = Column(Text, nullable=False, default="")
    pitch_content = Column(JSONType, nullable=False, default=dict)
    is_fallback = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
