from sqlalchemy import Column, String, Text, Integer, DateTime, ForeignKey

from database import Base, RecordMixin, new_id, utcnow


class GrowthConversationDB(RecordMixin, Base):
    __tablename__ = "growth_conversations"

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(255), nullable=False, index=True)
    conversation_title = Column(String(500), nullable=False, default="Growth Strategy Chat")
    message_count = Column(Integer, nullable=False, default=0)
    last_message_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)


class GrowthMessageDB(RecordMixin, Base):
    """Append-only; rows are never updated once written."""
    __tablename__ = "growth_messages"

    id = Column(String(36), primary_key=True, default=new_id)
    conversation_id = Column(String(36), ForeignKey("growth_conversations.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(String(255), nullable=False, index=True)
    role = Column(String(20), nullable=False)
    content = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, index=True)


class GrowthInsightDB(RecordMixin, Base):
    """Advisory annotations derived from assistant replies by keyword rules."""
    __tablename__ = "growth_insights"

    id = Column(String(36), primary_key=True, default=new_id)
    conversation_id = Column(String(36), ForeignKey("growth_conversations.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(String(255), nullable=False, index=True)
    insight_type = Column(String(20), nullable=False)
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    priority = Column(String(20), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
