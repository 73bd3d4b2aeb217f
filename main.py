import sys
import socket
from typing import Optional

from fastapi import FastAPI, HTTPException, Depends, status, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.exceptions import HTTPException as StarletteHTTPException

import config
from chat import handle_chat_turn
from database import get_db, init_db, close_db
from llm import CompletionClient
from logger import get_logger
from models.GrowthChatModel import GrowthChatRequest, GrowthChatResponse
from models.IdeaValidationModel import IdeaValidationRequest, ValidationResponse
from models.MarketResearchModel import MarketResearchRequest, ResearchResponse
from models.PitchModel import PitchGenerationRequest, PitchResponse
from models.RequestModel import MISSING_FIELDS_MESSAGE
from models.UserModel import SaveDashboardDataRequest, SyncUserRequest
from pipeline import GenerationPipeline
from repository import PersistenceError, Repository
import services

logger = get_logger(__name__)


# ========== Rate Limiting Configuration ==========

limiter = Limiter(key_func=get_remote_address, enabled=config.RATE_LIMIT_ENABLED)


# ========== FastAPI Application ==========

app = FastAPI(title="FoundrBox API", description="Idea validation, market research, pitch decks and growth coaching")

# Add rate limiter to app
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# Add CORS middleware to allow frontend to call the API
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ========== Error Responses ==========
# Every error leaves the API as {"error": "<short message>"}

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    missing = any(
        err.get("type") == "missing" or MISSING_FIELDS_MESSAGE in str(err.get("msg", ""))
        for err in errors
    )
    if not missing:
        logger.info("Rejected request body on %s: %s", request.url.path, errors[:5])
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": MISSING_FIELDS_MESSAGE if missing else "Invalid request body"},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s", request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )


# ========== Dependencies ==========

def get_completion_client(request: Request) -> CompletionClient:
    """Process-wide client created at startup; built lazily if startup was skipped."""
    client = getattr(request.app.state, "completion_client", None)
    if client is None:
        client = CompletionClient()
        request.app.state.completion_client = client
    return client


def get_pipeline(client: CompletionClient = Depends(get_completion_client)) -> GenerationPipeline:
    return GenerationPipeline(client)


def get_repository(db: AsyncSession = Depends(get_db)) -> Repository:
    return Repository(db)


def require_param(value: Optional[str], message: str = "Missing user_id") -> str:
    if not value:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=message)
    return value


# ========== Lifecycle ==========

@app.on_event("startup")
async def startup():
    logger.info("Initializing database...")
    await init_db()
    logger.info("Database initialized successfully")
    # Create the completion client only once
    app.state.completion_client = CompletionClient()


@app.on_event("shutdown")
async def shutdown():
    """Close database connections on shutdown"""
    logger.info("Closing database connections...")
    await close_db()
    logger.info("Database connections closed")


@app.get("/")
async def root():
    return {"message": "FoundrBox API", "version": "1.0.0"}


@app.get("/health")
async def health():
    return {"status": "healthy"}


# ========== AI Capability Endpoints ==========

@app.post("/api/validate-idea", response_model=ValidationResponse)
@limiter.limit(config.AI_RATE_LIMIT)
async def validate_idea_endpoint(
    request: Request,
    payload: IdeaValidationRequest,
    pipeline: GenerationPipeline = Depends(get_pipeline),
    repo: Repository = Depends(get_repository),
):
    """
    Score a startup idea.

    - **user_id**, **idea_title**, **idea_description**: required
    - target_audience, problem_solving, unique_value_proposition, business_model,
      technical_feasibility, resource_requirements: optional context
    """
    return await services.validate_idea(payload, pipeline, repo)


@app.post("/api/market-research", response_model=ResearchResponse)
@limiter.limit(config.AI_RATE_LIMIT)
async def market_research_endpoint(
    request: Request,
    payload: MarketResearchRequest,
    pipeline: GenerationPipeline = Depends(get_pipeline),
    repo: Repository = Depends(get_repository),
):
    """Market analysis for a project; trends, competitors and opportunities are also stored separately."""
    return await services.run_market_research(payload, pipeline, repo)


@app.post("/api/generate-pitch", response_model=PitchResponse)
@limiter.limit(config.AI_RATE_LIMIT)
async def generate_pitch_endpoint(
    request: Request,
    payload: PitchGenerationRequest,
    pipeline: GenerationPipeline = Depends(get_pipeline),
    repo: Repository = Depends(get_repository),
):
    """Slide-by-slide pitch deck strategy for an idea."""
    return await services.generate_pitch(payload, pipeline, repo)


@app.post("/api/growth-chat", response_model=GrowthChatResponse)
@limiter.limit(config.AI_RATE_LIMIT)
async def growth_chat_endpoint(
    request: Request,
    payload: GrowthChatRequest,
    pipeline: GenerationPipeline = Depends(get_pipeline),
    repo: Repository = Depends(get_repository),
):
    """
    Send a message to the growth strategist.
    Omit **conversation_id** to start a new conversation.
    """
    return await handle_chat_turn(payload, pipeline, repo)


# ========== List / Read Endpoints ==========

@app.get("/api/idea-validations")
async def list_idea_validations(user_id: Optional[str] = None, repo: Repository = Depends(get_repository)):
    user_id = require_param(user_id)
    try:
        return {"validations": await repo.list_idea_validations(user_id)}
    except PersistenceError:
        raise HTTPException(status_code=500, detail="Failed to load validations")


@app.get("/api/validated-ideas")
async def list_validated_ideas(user_id: Optional[str] = None, repo: Repository = Depends(get_repository)):
    user_id = require_param(user_id)
    try:
        return {"ideas": await repo.list_validated_ideas(user_id)}
    except PersistenceError:
        raise HTTPException(status_code=500, detail="Failed to load ideas")


@app.get("/api/market-research")
async def list_market_research(user_id: Optional[str] = None, repo: Repository = Depends(get_repository)):
    user_id = require_param(user_id)
    try:
        return {"research_projects": await repo.list_market_research(user_id)}
    except PersistenceError:
        raise HTTPException(status_code=500, detail="Failed to load research projects")


@app.get("/api/market-trends")
async def list_market_trends(
    user_id: Optional[str] = None,
    research_id: Optional[str] = None,
    repo: Repository = Depends(get_repository),
):
    user_id = require_param(user_id)
    try:
        return {"trends": await repo.list_market_trends(user_id, research_id)}
    except PersistenceError:
        raise HTTPException(status_code=500, detail="Failed to load trends")


@app.get("/api/pitch-history")
async def list_pitch_history(user_id: Optional[str] = None, repo: Repository = Depends(get_repository)):
    user_id = require_param(user_id)
    try:
        return {"pitches": await repo.list_pitches(user_id)}
    except PersistenceError:
        raise HTTPException(status_code=500, detail="Failed to load pitches")


@app.get("/api/growth-conversations")
async def list_growth_conversations(user_id: Optional[str] = None, repo: Repository = Depends(get_repository)):
    user_id = require_param(user_id)
    try:
        return {"conversations": await repo.list_conversations(user_id)}
    except PersistenceError:
        raise HTTPException(status_code=500, detail="Failed to load conversations")


@app.get("/api/growth-messages")
async def list_growth_messages(
    user_id: Optional[str] = None,
    conversation_id: Optional[str] = None,
    repo: Repository = Depends(get_repository),
):
    if not user_id or not conversation_id:
        raise HTTPException(status_code=400, detail="Missing required parameters")
    try:
        return {"messages": await repo.list_messages(user_id, conversation_id)}
    except PersistenceError:
        raise HTTPException(status_code=500, detail="Failed to load messages")


# ========== Dashboard & Users ==========

@app.post("/api/save-dashboard-data")
async def save_dashboard_data(payload: SaveDashboardDataRequest, repo: Repository = Depends(get_repository)):
    try:
        await repo.upsert_dashboard_data(payload.user_id, payload.data_type, payload.data)
    except PersistenceError:
        raise HTTPException(status_code=500, detail="Failed to save dashboard data")
    return {"success": True}


@app.get("/api/load-dashboard-data")
async def load_dashboard_data(user_id: Optional[str] = None, repo: Repository = Depends(get_repository)):
    user_id = require_param(user_id)
    try:
        return {"data": await repo.list_dashboard_data(user_id)}
    except PersistenceError:
        raise HTTPException(status_code=500, detail="Failed to load dashboard data")


@app.post("/api/sync-user")
async def sync_user(payload: SyncUserRequest, repo: Repository = Depends(get_repository)):
    """Mirror a user from the identity provider. Existing users are left untouched."""
    try:
        if await repo.get_user(payload.id) is None:
            await repo.create_record("users", {
                "id": payload.id,
                "email": payload.email,
                "full_name": payload.full_name,
            })
        else:
            logger.info("User already exists: %s", payload.id)
    except PersistenceError:
        raise HTTPException(status_code=500, detail="Failed to sync user")
    return {"success": True}


if __name__ == "__main__":
    # Run as API server: python main.py serve
    if len(sys.argv) > 1 and sys.argv[1] == "serve":
        import uvicorn

        def find_free_port(start_port=8000):
            """Find a free port starting from start_port"""
            port = start_port
            while port < start_port + 100:  # Limit search to avoid infinite loop
                with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
                    try:
                        s.bind(('', port))
                        return port
                    except OSError:
                        port += 1
            raise RuntimeError(f"Could not find a free port starting from {start_port}")

        port = config.PORT or find_free_port(8000)
        logger.info("Starting server on http://0.0.0.0:%s", port)
        uvicorn.run(app, host="0.0.0.0", port=port)
    else:
        print("Usage: python main.py serve")
        sys.exit(1)
