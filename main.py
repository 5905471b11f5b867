import logging
from contextlib import asynccontextmanager
import numpy as np
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse, JSONResponse
from truthguard.core.config import settings
from truthguard.routers import detection, sessions
from truthguard.services import get_analyzer, DetectionService, SessionStore

# Configure logging
logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL, logging.INFO))
logger = logging.getLogger(__name__)


# Application lifecycle management
@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: build the analyzer, detection service and session store
    app.state.analyzer = get_analyzer()
    app.state.detection_service = DetectionService(
        analyzer=app.state.analyzer,
        rng=np.random.default_rng(settings.RANDOM_SEED),
        jitter_max=settings.SCORE_JITTER_MAX,
        delay=settings.ANALYSIS_DELAY_SECONDS,
    )
    app.state.session_store = SessionStore(
        app.state.detection_service,
        delay=settings.ANALYSIS_DELAY_SECONDS,
        ttl=settings.SESSION_TTL_SECONDS,
        maxsize=settings.SESSION_MAX,
        history_limit=settings.HISTORY_LIMIT,
    )

    yield

    # Shutdown: drop analyses that have not published yet
    app.state.session_store.cancel_all()


# Initialize FastAPI app with ORJSON response and lifecycle management
app = FastAPI(
    lifespan=lifespan,
    default_response_class=ORJSONResponse,
    title=settings.APP_TITLE,
    description="Heuristic fake news detection with templated analysis reports"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "DELETE", "OPTIONS", "HEAD"],
    allow_headers=["*"],
    max_age=3600
)

# Include routers
app.include_router(detection.router)
app.include_router(sessions.router)


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}


@app.get("/")
async def root():
    return {"status": "healthy"}


@app.exception_handler(HTTPException)
async def http_exception_handler(request, exc):
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": str(exc.detail)},
    )


@app.exception_handler(Exception)
async def general_exception_handler(request, exc):
    logger.error(f"Unhandled error on {request.url.path}: {str(exc)}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"},
    )


if __name__ == "__main__":
    print("\n=== TruthGuard News Detection API ===")
    print(f"API endpoint: http://0.0.0.0:{settings.PORT}")
    print(f"Analysis delay: {settings.ANALYSIS_DELAY_SECONDS}s")
    print("=====================================\n")

    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=True,
        log_level=settings.LOG_LEVEL.lower(),
        proxy_headers=True
    )
