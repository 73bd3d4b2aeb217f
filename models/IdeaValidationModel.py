from typing import ClassVar, Dict, List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from models.RequestModel import CapabilityRequest

NOT_SPECIFIED = "Not specified"

Level = Literal["Low", "Medium", "High"]


# ========== Request ==========

class IdeaValidationRequest(CapabilityRequest):
    required_fields: ClassVar[Tuple[str, ...]] = ("user_id", "idea_title", "idea_description")

    idea_title: str
    idea_description: str
    target_audience: Optional[str] = None
    problem_solving: Optional[str] = None
    unique_value_proposition: Optional[str] = None
    business_model: Optional[str] = None
    technical_feasibility: Optional[str] = None
    resource_requirements: Optional[str] = None

    def prompt_fields(self) -> Dict[str, str]:
        return {
            "idea_title": self.idea_title,
            "idea_description": self.idea_description,
            "target_audience": self.target_audience or NOT_SPECIFIED,
            "problem_solving": self.problem_solving or NOT_SPECIFIED,
            "unique_value_proposition": self.unique_value_proposition or NOT_SPECIFIED,
            "business_model": self.business_model or NOT_SPECIFIED,
            "technical_feasibility": self.technical_feasibility or NOT_SPECIFIED,
            "resource_requirements": self.resource_requirements or NOT_SPECIFIED,
        }


# ========== Result ==========

class CategoryScores(BaseModel):
    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)

    problem_clarity: float = Field(ge=0, le=100, description="Is the problem well-defined and real?")
    solution_fit: float = Field(ge=0, le=100, description="How well the solution addresses the problem")
    value_proposition: float = Field(ge=0, le=100, description="Is the value clear and compelling?")
    technical_feasibility: float = Field(ge=0, le=100, description="Can this be built with current technology?")
    business_model: float = Field(ge=0, le=100, description="Does the monetization make sense?")
    execution_readiness: float = Field(ge=0, le=100, description="How ready this is for implementation")


class FeasibilityAssessment(BaseModel):
    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)

    technical_complexity: Level
    resource_intensity: Level
    time_to_prototype: Literal["1-2 weeks", "1-2 months", "3-6 months", "6+ months"]


class ValidationResult(BaseModel):
    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)

    overall_score: float = Field(ge=0, le=100, description="Overall idea score")
    category_scores: CategoryScores
    strengths: List[str]
    weaknesses: List[str]
    opportunities: List[str]
    risks: List[str]
    recommendations: List[str]
    next_steps: List[str]
    validation_methods: List[str]
    feasibility_assessment: FeasibilityAssessment
    improvement_suggestions: List[str]
    success_likelihood: Level
    innovation_level: Literal["Incremental", "Significant", "Breakthrough"]


class ValidationResponse(BaseModel):
    success: bool = True
    validation_id: str
    result: ValidationResult
