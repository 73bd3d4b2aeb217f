from typing import ClassVar, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from models.RequestModel import CapabilityRequest


class PitchGenerationRequest(CapabilityRequest):
    required_fields: ClassVar[Tuple[str, ...]] = ("user_id", "idea_title")

    idea_title: str
    idea_description: Optional[str] = None
    idea_source: Optional[str] = None
    idea_id: Optional[str] = None

    def prompt_fields(self) -> Dict[str, str]:
        return {
            "idea_title": self.idea_title,
            "idea_description": self.idea_description or "No detailed description provided",
        }


class ExecutiveSummary(BaseModel):
    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)

    pitch_theme: str
    key_narrative: str
    target_audience: str = Field(description="Who the deck is for, e.g. 'Angel Investors'")
    presentation_duration: str
    total_slides: int


class Slide(BaseModel):
    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)

    slide_number: int
    title: str
    purpose: str
    content_strategy: str
    key_elements: List[str]
    visual_recommendations: str
    talking_points: List[str]
    duration_seconds: int
    design_tips: str


class StorytellingFlow(BaseModel):
    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)

    hook: str
    problem_narrative: str
    solution_reveal: str
    market_opportunity: str
    competitive_advantage: str
    traction_story: str
    financial_projection: str
    call_to_action: str


class DesignGuidelines(BaseModel):
    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)

    color_scheme: str
    typography_recommendations: str
    visual_style: str
    image_suggestions: List[str]
    chart_types: List[str]
    branding_tips: str


class PresenterTips(BaseModel):
    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)

    opening_strategy: str
    body_language: str
    transition_techniques: List[str]
    handling_questions: str
    closing_strategy: str


class CustomizationSuggestion(BaseModel):
    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)

    audience_type: str
    modifications: str
    emphasis_areas: List[str]


class SuccessMetrics(BaseModel):
    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)

    pitch_effectiveness_score: float = Field(ge=0, le=100)
    investor_readiness: str
    strengths: List[str]
    improvement_areas: List[str]


class PitchContent(BaseModel):
    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)

    executive_summary: ExecutiveSummary
    slides: List[Slide]
    storytelling_flow: StorytellingFlow
    design_guidelines: DesignGuidelines
    presenter_tips: PresenterTips
    customization_suggestions: List[CustomizationSuggestion]
    success_metrics: SuccessMetrics


class PitchResponse(BaseModel):
    success: bool = True
    pitch_id: str
    pitch_content: PitchContent
