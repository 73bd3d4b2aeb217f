from typing import Any, Dict, Iterable

from fastapi import HTTPException, status

from database import utcnow
from helper.insights import derive_insights
from logger import get_logger
from models.GrowthChatDBModel import GrowthConversationDB, GrowthMessageDB
from models.GrowthChatModel import DEFAULT_CONVERSATION_TITLE, GrowthChatRequest
from pipeline import GenerationPipeline
from repository import PersistenceError, Repository

logger = get_logger(__name__)

# Earlier messages included in the prompt
HISTORY_LIMIT = 20

SPEAKER_LABELS = {"user": "Founder", "assistant": "Alex"}


def build_transcript(messages: Iterable[GrowthMessageDB]) -> str:
    return "\n\n".join(
        f"{SPEAKER_LABELS.get(message.role, message.role)}: {message.content}"
        for message in messages
    )


async def _open_conversation(payload: GrowthChatRequest, repo: Repository) -> str:
    if payload.conversation_id:
        try:
            conversation = await repo.get_conversation(payload.conversation_id, payload.user_id)
        except PersistenceError:
            raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to load conversation")
        if conversation is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Conversation not found")
        return conversation.id

    try:
        return await repo.create_record("growth_conversations", {
            "user_id": payload.user_id,
            "conversation_title": payload.conversation_title or DEFAULT_CONVERSATION_TITLE,
            "message_count": 0,
        })
    except PersistenceError:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to create conversation")


async def _save_insights(repo: Repository, user_id: str, conversation_id: str, insights) -> None:
    """Best effort: insights are advisory, losing them must not fail the turn."""
    if not insights:
        return
    try:
        await repo.append_child_records("growth_insights", conversation_id, [
            {
                "user_id": user_id,
                "insight_type": insight["type"],
                "title": insight["title"],
                "content": insight["content"],
                "priority": insight["priority"],
            }
            for insight in insights
        ])
    except PersistenceError as e:
        logger.warning("Could not store insights for conversation %s: %s", conversation_id, e)


async def handle_chat_turn(
    payload: GrowthChatRequest,
    pipeline: GenerationPipeline,
    repo: Repository,
) -> Dict[str, Any]:
    """
    One growth-chat turn: append the founder's message, ask for a reply with
    the recent history as context, append the reply, refresh thread metadata
    and derive advisory insights.
    """
    conversation_id = await _open_conversation(payload, repo)

    try:
        user_message_id = await repo.create_record("growth_messages", {
            "conversation_id": conversation_id,
            "user_id": payload.user_id,
            "role": "user",
            "content": payload.message,
        })
        history = await repo.recent_messages(conversation_id, HISTORY_LIMIT, exclude_id=user_message_id)
    except PersistenceError:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to save message")

    reply, used_fallback = await pipeline.chat_reply(build_transcript(history), payload.message)

    try:
        await repo.create_record("growth_messages", {
            "conversation_id": conversation_id,
            "user_id": payload.user_id,
            "role": "assistant",
            "content": reply,
        })
        now = utcnow()
        await repo.update_record("growth_conversations", conversation_id, {
            "message_count": GrowthConversationDB.message_count + 2,
            "last_message_at": now,
            "updated_at": now,
        })
    except PersistenceError:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to save response")

    insights = [] if used_fallback else derive_insights(reply)
    await _save_insights(repo, payload.user_id, conversation_id, insights)

    return {
        "success": True,
        "conversation_id": conversation_id,
        "response": reply,
        "insights": insights,
    }
