from typing import Any, Callable, Optional

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import HumanMessage, SystemMessage
from langchain_ollama import ChatOllama
from langchain_openai import ChatOpenAI

import config
from logger import get_logger

logger = get_logger(__name__)


def choose_llm() -> BaseChatModel:
    """Use Ollama when USE_OLLAMA is set and it initializes; otherwise OpenAI."""
    if config.USE_OLLAMA:
        try:
            logger.info("Connecting to Ollama with model %s", config.OLLAMA_MODEL)
            # Defaults to http://localhost:11434
            return ChatOllama(
                model=config.OLLAMA_MODEL,
                temperature=config.LLM_TEMPERATURE,
                num_predict=config.LLM_MAX_TOKENS,
                client_kwargs={"timeout": config.LLM_TIMEOUT},
            )
        except Exception as e:
            logger.warning("Ollama init failed: %s. Falling back to OpenAI...", e)

    logger.info("Using OpenAI model %s", config.OPENAI_MODEL)
    return ChatOpenAI(
        model=config.OPENAI_MODEL,
        temperature=config.LLM_TEMPERATURE,
        api_key=config.OPENAI_API_KEY,
        max_tokens=config.LLM_MAX_TOKENS,
        timeout=config.LLM_TIMEOUT,
        max_retries=0,
    )


def _extract_chain_response(result: Any) -> str:
    """
    Extract text content from a model invocation result.
    Handles AIMessage objects (string or content-block lists) and plain values.
    """
    content = getattr(result, "content", result)
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for block in content:
            if isinstance(block, str):
                parts.append(block)
            elif isinstance(block, dict) and block.get("type") == "text":
                parts.append(block.get("text", ""))
        return "".join(parts)
    return str(content)


def _describe_ollama_403_error(error: Exception) -> Optional[str]:
    """Returns a troubleshooting hint for 403 errors from Ollama, None otherwise."""
    error_msg = str(error)
    error_type = type(error).__name__

    is_403_error = (
        "403" in error_msg or
        "status code: 403" in error_msg.lower() or
        error_type == "HTTPStatusError"
    )
    if not config.USE_OLLAMA or not is_403_error:
        return None

    return (
        "Ollama API request failed (403). "
        "Check that Ollama is running (`ollama serve` or `curl http://localhost:11434/api/tags`) "
        "and reachable, or set USE_OLLAMA=false to use OpenAI instead."
    )


class CompletionClient:
    """
    Thin text-in, text-out wrapper around a LangChain chat model.

    The model is built on first use, so a missing credential surfaces as a
    completion error for the request instead of failing application startup.
    """

    def __init__(self, llm: Optional[BaseChatModel] = None, llm_factory: Callable[[], BaseChatModel] = choose_llm):
        self._llm = llm
        self._llm_factory = llm_factory

    @property
    def llm(self) -> BaseChatModel:
        if self._llm is None:
            self._llm = self._llm_factory()
        return self._llm

    def complete(self, system_instruction: str, prompt: str) -> str:
        """Single blocking completion call. Errors propagate to the caller."""
        messages = [SystemMessage(content=system_instruction), HumanMessage(content=prompt)]
        try:
            result = self.llm.invoke(messages)
        except Exception as e:
            hint = _describe_ollama_403_error(e)
            if hint:
                logger.error(hint)
            raise
        return _extract_chain_response(result)
