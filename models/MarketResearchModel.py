from typing import ClassVar, Dict, List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from models.RequestModel import CapabilityRequest

Level = Literal["Low", "Medium", "High"]


# ========== Request ==========

class MarketResearchRequest(CapabilityRequest):
    required_fields: ClassVar[Tuple[str, ...]] = ("user_id", "project_title", "industry_sector", "target_market")

    project_title: str
    industry_sector: str
    target_market: str
    geographic_focus: Optional[str] = None
    research_goals: Optional[str] = None

    def prompt_fields(self) -> Dict[str, str]:
        return {
            "project_title": self.project_title,
            "industry_sector": self.industry_sector,
            "target_market": self.target_market,
            "geographic_focus": self.geographic_focus or "Global",
            "research_goals": self.research_goals or "Comprehensive market analysis",
        }


# ─────────────────────────────────────────
# MARKET + TRENDS
# ─────────────────────────────────────────

class MarketOverview(BaseModel):
    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)

    market_size_usd: float = Field(description="Total addressable market in USD")
    growth_rate_percentage: float = Field(description="Yearly growth rate in percent")
    market_maturity: Literal["Emerging", "Growth", "Mature", "Declining"]
    key_drivers: List[str]


class IndustryTrend(BaseModel):
    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)

    trend_name: str
    description: str
    impact_level: Literal["High", "Medium", "Low"]
    time_horizon: Literal["Short-term", "Medium-term", "Long-term"]
    opportunities: List[str]


# ─────────────────────────────────────────
# COMPETITION + CUSTOMERS
# ─────────────────────────────────────────

class KeyPlayer(BaseModel):
    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)

    company_name: str
    market_share: float = Field(description="Market share in percent")
    strengths: List[str]
    weaknesses: List[str]
    threat_level: Literal["Low", "Medium", "High", "Critical"]


class CompetitiveLandscape(BaseModel):
    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)

    competition_intensity: Literal["Low", "Medium", "High", "Very High"]
    key_players: List[KeyPlayer]
    market_gaps: List[str]


class CustomerSegment(BaseModel):
    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)

    segment_name: str
    size_percentage: float
    characteristics: List[str]
    pain_points: List[str]
    spending_power: Level


class CustomerAnalysis(BaseModel):
    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)

    primary_segments: List[CustomerSegment]
    buying_behavior: str
    decision_factors: List[str]


# ─────────────────────────────────────────
# OPPORTUNITIES + BARRIERS
# ─────────────────────────────────────────

class MarketOpportunity(BaseModel):
    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)

    opportunity_title: str
    description: str
    potential_size_usd: float
    difficulty_level: Level
    time_to_market: Literal["3-6 months", "6-12 months", "12-24 months", "24+ months"]
    required_investment: Level
    success_probability: float = Field(ge=0, le=100, description="Chance of success in percent")


class EntryBarrier(BaseModel):
    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)

    barrier_type: str
    severity: Level
    description: str
    mitigation_strategies: List[str]


# ─────────────────────────────────────────
# ENVIRONMENT + RECOMMENDATIONS
# ─────────────────────────────────────────

class RegulatoryEnvironment(BaseModel):
    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)

    regulatory_complexity: Level
    key_regulations: List[str]
    compliance_requirements: List[str]
    regulatory_trends: List[str]


class TechnologyImpact(BaseModel):
    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)

    disruption_level: Level
    emerging_technologies: List[str]
    adoption_timeline: str
    impact_on_traditional_players: str


class Recommendation(BaseModel):
    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)

    priority: Literal["High", "Medium", "Low"]
    recommendation: str
    rationale: str
    expected_impact: str


class RiskAssessment(BaseModel):
    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)

    overall_risk_level: Level
    key_risks: List[str]
    mitigation_strategies: List[str]


class ResearchResult(BaseModel):
    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)

    market_overview: MarketOverview
    industry_trends: List[IndustryTrend]
    competitive_landscape: CompetitiveLandscape
    customer_analysis: CustomerAnalysis
    market_opportunities: List[MarketOpportunity]
    entry_barriers: List[EntryBarrier]
    regulatory_environment: RegulatoryEnvironment
    technology_impact: TechnologyImpact
    recommendations: List[Recommendation]
    risk_assessment: RiskAssessment


class ResearchResponse(BaseModel):
    success: bool = True
    research_id: str
    result: ResearchResult
