from sqlalchemy import Column, String, Text, Integer, Float, Boolean, DateTime, ForeignKey

from database import Base, JSONType, RecordMixin, new_id, utcnow


class MarketResearchDB(RecordMixin, Base):
    __tablename__ = "market_research"

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(255), nullable=False, index=True)
    project_title = Column(String(500), nullable=False)
    industry_sector = Column(String(255), nullable=False)
    target_market = Column(Text, nullable=False)
    geographic_focus = Column(String(255), nullable=True)
    research_goals = Column(Text, nullable=True)
    research_result = Column(JSONType, nullable=False, default=dict)
    status = Column(String(20), nullable=False, default="processing")
    is_fallback = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)


# ========== Child rows fanned out from a research result ==========

class MarketTrendDB(RecordMixin, Base):
    __tablename__ = "market_trends"

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(255), nullable=False, index=True)
    research_id = Column(String(36), ForeignKey("market_research.id", ondelete="CASCADE"), nullable=False, index=True)
    trend_name = Column(String(500), nullable=False)
    trend_data = Column(JSONType, nullable=False, default=dict)
    impact_score = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)


class CompetitorAnalysisDB(RecordMixin, Base):
    __tablename__ = "competitor_analysis"

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(255), nullable=False, index=True)
    research_id = Column(String(36), ForeignKey("market_research.id", ondelete="CASCADE"), nullable=False, index=True)
    competitor_name = Column(String(500), nullable=False)
    competitor_data = Column(JSONType, nullable=False, default=dict)
    threat_level = Column(String(20), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)


class MarketOpportunityDB(RecordMixin, Base):
    __tablename__ = "market_opportunities"

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(255), nullable=False, index=True)
    research_id = Column(String(36), ForeignKey("market_research.id", ondelete="CASCADE"), nullable=False, index=True)
    opportunity_title = Column(String(500), nullable=False)
    opportunity_data = Column(JSONType, nullable=False, default=dict)
    potential_score = Column(Float, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
