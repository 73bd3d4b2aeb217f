"""
AI-response ingestion pipeline.

Request model -> (system instruction, prompt) -> one completion call ->
JSON extraction -> schema validation -> result. Any failure after the request
has been accepted is absorbed by a deterministic fallback, so callers always
receive a result that validates against the capability's schema.
"""

import asyncio
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional, Tuple, Type

from langchain_core.prompts import PromptTemplate
from pydantic import BaseModel, ValidationError

from helper.fallbacks import (
    FALLBACK_CHAT_REPLY,
    fallback_market_research,
    fallback_pitch,
    fallback_validation,
)
from helper.json_extraction import extract_json_object
from llm import CompletionClient
from logger import get_logger
from models.IdeaValidationModel import ValidationResult
from models.MarketResearchModel import ResearchResult
from models.PitchModel import PitchContent
from models.RequestModel import CapabilityRequest
import template

logger = get_logger(__name__)

RAW_LOG_LIMIT = 500


class Capability(str, Enum):
    VALIDATE_IDEA = "validate-idea"
    MARKET_RESEARCH = "market-research"
    GENERATE_PITCH = "generate-pitch"
    GROWTH_CHAT = "growth-chat"


class PipelineState(Enum):
    PENDING = "pending"
    AI_CALLED = "ai_called"
    PARSED_OK = "parsed_ok"
    PARSE_FAILED = "parse_failed"
    SCHEMA_INVALID = "schema_invalid"
    AI_ERROR = "ai_error"
    RESULT_READY = "result_ready"


@dataclass(frozen=True)
class CapabilitySpec:
    capability: Capability
    system_instruction: str
    prompt: PromptTemplate
    result_model: Type[BaseModel]
    required_keys: Tuple[str, ...]
    fallback: Callable[[Any], Dict[str, Any]]


@dataclass
class GenerationOutcome:
    result: Dict[str, Any]
    # PARSED_OK or the failure state that led to the fallback
    branch: PipelineState
    used_fallback: bool
    state: PipelineState = PipelineState.RESULT_READY


VALIDATION_SPEC = CapabilitySpec(
    capability=Capability.VALIDATE_IDEA,
    system_instruction=template.VALIDATION_SYSTEM_INSTRUCTION,
    prompt=template.VALIDATION_PROMPT,
    result_model=ValidationResult,
    required_keys=("overall_score", "category_scores"),
    fallback=lambda req: fallback_validation(req.idea_title, req.idea_description),
)

MARKET_RESEARCH_SPEC = CapabilitySpec(
    capability=Capability.MARKET_RESEARCH,
    system_instruction=template.MARKET_RESEARCH_SYSTEM_INSTRUCTION,
    prompt=template.MARKET_RESEARCH_PROMPT,
    result_model=ResearchResult,
    required_keys=("market_overview",),
    fallback=lambda req: fallback_market_research(req.project_title, req.industry_sector, req.target_market),
)

PITCH_SPEC = CapabilitySpec(
    capability=Capability.GENERATE_PITCH,
    system_instruction=template.PITCH_SYSTEM_INSTRUCTION,
    prompt=template.PITCH_PROMPT,
    result_model=PitchContent,
    required_keys=("executive_summary", "slides"),
    fallback=lambda req: fallback_pitch(req.idea_title, req.idea_description or ""),
)

CAPABILITY_SPECS: Dict[Capability, CapabilitySpec] = {
    spec.capability: spec for spec in (VALIDATION_SPEC, MARKET_RESEARCH_SPEC, PITCH_SPEC)
}


# ========== Request Normalizer ==========

def build_prompt(spec: CapabilitySpec, request: CapabilityRequest) -> Tuple[str, str]:
    """Pure: the same request always yields the same (system instruction, prompt)."""
    return spec.system_instruction, spec.prompt.format(**request.prompt_fields())


def build_chat_prompt(transcript: str, message: str) -> Tuple[str, str]:
    prompt = template.GROWTH_CHAT_PROMPT.format(conversation_context=transcript, message=message)
    return template.GROWTH_CHAT_SYSTEM_INSTRUCTION, prompt


# ========== Completion Extractor & Validator ==========

def validate_result(spec: CapabilitySpec, parsed: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    """Returns the schema-shaped result, or None if the payload does not conform."""
    missing = [key for key in spec.required_keys if key not in parsed]
    if missing:
        logger.warning("%s response is missing required keys: %s", spec.capability.value, ", ".join(missing))
        return None
    try:
        return spec.result_model.model_validate(parsed).model_dump(mode="json")
    except ValidationError as e:
        logger.warning("%s response failed schema validation: %s", spec.capability.value, e.errors()[:5])
        return None


def fallback_result(spec: CapabilitySpec, request: CapabilityRequest) -> Dict[str, Any]:
    return spec.result_model.model_validate(spec.fallback(request)).model_dump(mode="json")


class GenerationPipeline:
    def __init__(self, client: CompletionClient):
        self.client = client

    async def _complete(self, system_instruction: str, prompt: str) -> str:
        # LangChain invoke blocks; keep it off the event loop
        return await asyncio.to_thread(self.client.complete, system_instruction, prompt)

    async def generate(self, spec: CapabilitySpec, request: CapabilityRequest) -> GenerationOutcome:
        """
        Run one request through the pipeline. Never raises for completion,
        extraction or validation problems; those are logged and replaced by
        the capability's fallback result.
        """
        system_instruction, prompt = build_prompt(spec, request)
        name = spec.capability.value

        state = PipelineState.PENDING
        try:
            raw_text = await self._complete(system_instruction, prompt)
            state = PipelineState.AI_CALLED
        except Exception as e:
            logger.error("%s completion call failed: %s: %s", name, type(e).__name__, e)
            state = PipelineState.AI_ERROR
            raw_text = None

        if state is PipelineState.AI_CALLED:
            logger.debug("%s raw response: %s...", name, raw_text[:RAW_LOG_LIMIT])
            parsed = extract_json_object(raw_text)
            if parsed is None:
                logger.warning("%s response contained no parseable JSON object", name)
                state = PipelineState.PARSE_FAILED
            else:
                result = validate_result(spec, parsed)
                if result is not None:
                    logger.info("%s response parsed successfully", name)
                    return GenerationOutcome(result=result, branch=PipelineState.PARSED_OK, used_fallback=False)
                state = PipelineState.SCHEMA_INVALID

        logger.info("%s using fallback result (%s)", name, state.value)
        return GenerationOutcome(result=fallback_result(spec, request), branch=state, used_fallback=True)

    async def chat_reply(self, transcript: str, message: str) -> Tuple[str, bool]:
        """
        Prose reply for the growth chat. Returns (reply, used_fallback); the
        apology text stands in when the completion service fails or answers
        with nothing.
        """
        system_instruction, prompt = build_chat_prompt(transcript, message)
        name = Capability.GROWTH_CHAT.value
        try:
            reply = await self._complete(system_instruction, prompt)
        except Exception as e:
            logger.error("%s completion call failed: %s: %s", name, type(e).__name__, e)
            return FALLBACK_CHAT_REPLY, True
        if not reply or not reply.strip():
            logger.warning("%s completion returned an empty reply", name)
            return FALLBACK_CHAT_REPLY, True
        return reply.strip(), False
