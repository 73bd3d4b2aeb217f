from sqlalchemy import Column, String, DateTime, UniqueConstraint

from database import Base, JSONType, RecordMixin, new_id, utcnow


class DashboardDataDB(RecordMixin, Base):
    __tablename__ = "dashboard_data"
    __table_args__ = (UniqueConstraint("user_id", "data_type", name="uq_dashboard_data_user_type"),)

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(255), nullable=False, index=True)
    # e.g. "mvp_stages", "metrics", "tasks"
    data_type = Column(String(100), nullable=False)
    data = Column(JSONType, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)
