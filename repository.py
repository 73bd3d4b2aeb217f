import functools
from typing import Any, Dict, Iterable, List, Optional, Type

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from database import Base
from logger import get_logger
from models.DashboardDBModel import DashboardDataDB
from models.GrowthChatDBModel import GrowthConversationDB, GrowthInsightDB, GrowthMessageDB
from models.IdeaValidationDBModel import IdeaValidationDB
from models.MarketResearchDBModel import (
    CompetitorAnalysisDB,
    MarketOpportunityDB,
    MarketResearchDB,
    MarketTrendDB,
)
from models.PitchDBModel import PitchDB
from models.UserDBModel import UserDB

logger = get_logger(__name__)


class PersistenceError(Exception):
    """A database read or write failed. Distinct from completion failures."""


RECORD_KINDS: Dict[str, Type[Base]] = {
    model.__tablename__: model
    for model in (
        UserDB,
        IdeaValidationDB,
        MarketResearchDB,
        MarketTrendDB,
        CompetitorAnalysisDB,
        MarketOpportunityDB,
        PitchDB,
        GrowthConversationDB,
        GrowthMessageDB,
        GrowthInsightDB,
        DashboardDataDB,
    )
}

# Child tables and the column pointing at their parent row
CHILD_PARENT_KEYS: Dict[str, str] = {
    "market_trends": "research_id",
    "competitor_analysis": "research_id",
    "market_opportunities": "research_id",
    "growth_messages": "conversation_id",
    "growth_insights": "conversation_id",
}

VALIDATED_IDEA_COLUMNS = (
    "id", "idea_title", "idea_description", "target_audience", "problem_solving",
    "unique_value_proposition", "business_model", "technical_feasibility",
    "resource_requirements", "overall_score", "created_at", "updated_at",
)


def _model_for(kind: str) -> Type[Base]:
    try:
        return RECORD_KINDS[kind]
    except KeyError:
        raise ValueError(f"Unknown record kind: {kind}")


def _persistence_errors(operation: str):
    """Roll back and re-raise database failures as PersistenceError."""
    def decorator(func):
        @functools.wraps(func)
        async def wrapper(self, *args, **kwargs):
            try:
                return await func(self, *args, **kwargs)
            except SQLAlchemyError as e:
                logger.error("Database error during %s: %s", operation, e)
                await self.session.rollback()
                raise PersistenceError(f"{operation} failed") from e
        return wrapper
    return decorator


class Repository:
    """Persistence adapter over one request-scoped AsyncSession. Every write commits."""

    def __init__(self, session: AsyncSession):
        self.session = session

    # ========== Writes ==========

    @_persistence_errors("create_record")
    async def create_record(self, kind: str, fields: Dict[str, Any]) -> str:
        record = _model_for(kind)(**fields)
        self.session.add(record)
        await self.session.commit()
        return record.id

    @_persistence_errors("update_record")
    async def update_record(self, kind: str, record_id: str, patch: Dict[str, Any]) -> None:
        model = _model_for(kind)
        result = await self.session.execute(
            update(model).where(model.id == record_id).values(**patch)
        )
        if result.rowcount == 0:
            await self.session.rollback()
            raise PersistenceError(f"{kind} {record_id} not found")
        await self.session.commit()

    @_persistence_errors("append_child_records")
    async def append_child_records(self, kind: str, parent_id: str, items: Iterable[Dict[str, Any]]) -> None:
        """Inserts one row per item, committing after each."""
        model = _model_for(kind)
        parent_key = CHILD_PARENT_KEYS[kind]
        for item in items:
            self.session.add(model(**{**item, parent_key: parent_id}))
            await self.session.commit()

    @_persistence_errors("upsert_dashboard_data")
    async def upsert_dashboard_data(self, user_id: str, data_type: str, data: Any) -> None:
        existing = await self.session.scalar(
            select(DashboardDataDB).where(
                DashboardDataDB.user_id == user_id,
                DashboardDataDB.data_type == data_type,
            )
        )
        if existing is None:
            self.session.add(DashboardDataDB(user_id=user_id, data_type=data_type, data=data))
        else:
            existing.data = data
        await self.session.commit()

    # ========== Reads ==========

    async def _all(self, statement) -> List[Dict[str, Any]]:
        rows = (await self.session.scalars(statement)).all()
        return [row.to_dict() for row in rows]

    @_persistence_errors("get_user")
    async def get_user(self, user_id: str) -> Optional[UserDB]:
        return await self.session.get(UserDB, user_id)

    @_persistence_errors("get_conversation")
    async def get_conversation(self, conversation_id: str, user_id: str) -> Optional[GrowthConversationDB]:
        return await self.session.scalar(
            select(GrowthConversationDB).where(
                GrowthConversationDB.id == conversation_id,
                GrowthConversationDB.user_id == user_id,
            )
        )

    @_persistence_errors("list_idea_validations")
    async def list_idea_validations(self, user_id: str) -> List[Dict[str, Any]]:
        return await self._all(
            select(IdeaValidationDB)
            .where(IdeaValidationDB.user_id == user_id)
            .order_by(IdeaValidationDB.created_at.desc())
        )

    @_persistence_errors("list_validated_ideas")
    async def list_validated_ideas(self, user_id: str) -> List[Dict[str, Any]]:
        ideas = await self.list_idea_validations(user_id)
        return [{name: idea[name] for name in VALIDATED_IDEA_COLUMNS} for idea in ideas]

    @_persistence_errors("list_market_research")
    async def list_market_research(self, user_id: str) -> List[Dict[str, Any]]:
        return await self._all(
            select(MarketResearchDB)
            .where(MarketResearchDB.user_id == user_id)
            .order_by(MarketResearchDB.created_at.desc())
        )

    @_persistence_errors("list_market_trends")
    async def list_market_trends(self, user_id: str, research_id: Optional[str] = None) -> List[Dict[str, Any]]:
        statement = select(MarketTrendDB).where(MarketTrendDB.user_id == user_id)
        if research_id:
            statement = statement.where(MarketTrendDB.research_id == research_id)
        return await self._all(statement.order_by(MarketTrendDB.impact_score.desc()))

    @_persistence_errors("list_pitches")
    async def list_pitches(self, user_id: str) -> List[Dict[str, Any]]:
        return await self._all(
            select(PitchDB)
            .where(PitchDB.user_id == user_id)
            .order_by(PitchDB.created_at.desc())
        )

    @_persistence_errors("list_conversations")
    async def list_conversations(self, user_id: str) -> List[Dict[str, Any]]:
        return await self._all(
            select(GrowthConversationDB)
            .where(GrowthConversationDB.user_id == user_id)
            .order_by(GrowthConversationDB.updated_at.desc())
        )

    @_persistence_errors("list_messages")
    async def list_messages(self, user_id: str, conversation_id: str) -> List[Dict[str, Any]]:
        return await self._all(
            select(GrowthMessageDB)
            .where(
                GrowthMessageDB.user_id == user_id,
                GrowthMessageDB.conversation_id == conversation_id,
            )
            .order_by(GrowthMessageDB.created_at.asc())
        )

    @_persistence_errors("recent_messages")
    async def recent_messages(
        self,
        conversation_id: str,
        limit: int,
        exclude_id: Optional[str] = None,
    ) -> List[GrowthMessageDB]:
        """Up to `limit` most recent messages of a thread, oldest first."""
        statement = select(GrowthMessageDB).where(GrowthMessageDB.conversation_id == conversation_id)
        if exclude_id:
            statement = statement.where(GrowthMessageDB.id != exclude_id)
        statement = statement.order_by(GrowthMessageDB.created_at.desc()).limit(limit)
        rows = (await self.session.scalars(statement)).all()
        return list(reversed(rows))

    @_persistence_errors("list_dashboard_data")
    async def list_dashboard_data(self, user_id: str) -> List[Dict[str, Any]]:
        return await self._all(
            select(DashboardDataDB)
            .where(DashboardDataDB.user_id == user_id)
            .order_by(DashboardDataDB.data_type.asc())
        )
