from typing import ClassVar, List, Literal, Optional, Tuple

from pydantic import BaseModel, Field

from models.RequestModel import CapabilityRequest

DEFAULT_CONVERSATION_TITLE = "Growth Strategy Chat"


class GrowthChatRequest(CapabilityRequest):
    required_fields: ClassVar[Tuple[str, ...]] = ("user_id", "message")

    message: str
    conversation_id: Optional[str] = None
    conversation_title: Optional[str] = None


class Insight(BaseModel):
    """Advisory annotation derived from an assistant reply. Not authoritative."""
    type: Literal["strategy", "tactic", "metric"]
    title: str
    content: str = Field(description="Truncated excerpt of the assistant reply")
    priority: Literal["high", "medium", "low"]


class GrowthChatResponse(BaseModel):
    success: bool = True
    conversation_id: str
    response: str
    insights: List[Insight]
