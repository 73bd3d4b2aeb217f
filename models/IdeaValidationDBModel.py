from sqlalchemy import Column, String, Text, Float, Boolean, DateTime

from database import Base, JSONType, RecordMixin, new_id, utcnow


class IdeaValidationDB(RecordMixin, Base):
    __tablename__ = "idea_validations"

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(255), nullable=False, index=True)
    idea_title = Column(String(500), nullable=False)
    idea_description = Column(Text, nullable=False)
    target_audience = Column(Text, nullable=True)
    problem_solving = Column(Text, nullable=True)
    unique_value_proposition = Column(Text, nullable=True)
    business_model = Column(Text, nullable=True)
    technical_feasibility = Column(Text, nullable=True)
    resource_requirements = Column(Text, nullable=True)
    validation_result = Column(JSONType, nullable=False, default=dict)
    overall_score = Column(Float, nullable=False, default=0)
    status = Column(String(20), nullable=False, default="processing")
    is_fallback = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)
