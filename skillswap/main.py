import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.routing import Match
from prometheus_client import Counter, Histogram, make_asgi_app

from skillswap.api.routes import router as api_router
from skillswap.core.config import settings
from skillswap.core.exceptions import register_exception_handlers
from skillswap.db.database import database
from skillswap.db.seed import seed_database

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

REQUEST_COUNT = Counter(
    "skillswap_request_count",
    "Total request count",
    ["method", "endpoint", "status"]
)
REQUEST_LATENCY = Histogram(
    "skillswap_request_latency_seconds",
    "Request latency in seconds",
    ["method", "endpoint"]
)

# shared label for requests that match no route
UNMATCHED_ENDPOINT = "<unmatched>"


def route_template(request: Request) -> str:
    """Full path template of the route serving this request, prefix included."""
    for route in request.app.router.routes:
        match, _ = route.matches(request.scope)
        if match == Match.FULL:
            return route.path
    return UNMATCHED_ENDPOINT


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting up the application...")
    logger.info(f"CORS origins: {settings.ALLOWED_ORIGINS}")
    seed_database(database, settings)
    logger.info(f"Store ready with {database.users.count()} users and {database.skills.count()} skills")

    yield

    logger.info("Shutting down the application...")


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="SkillSwap - skill exchange marketplace",
    version=settings.VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log request timing and status"""
    # resolved before the router rewrites the scope
    endpoint = route_template(request)
    start_time = time.time()
    response = await call_next(request)
    duration = time.time() - start_time

    REQUEST_COUNT.labels(request.method, endpoint, response.status_code).inc()
    REQUEST_LATENCY.labels(request.method, endpoint).observe(duration)

    logger.info(
        f"{request.method} {request.url.path} "
        f"Status: {response.status_code} "
        f"Duration: {duration:.3f}s"
    )
    return response


register_exception_handlers(app)

metrics_app = make_asgi_app()
app.mount("/metrics", metrics_app)

app.include_router(api_router, prefix=settings.API_V1_STR)


@app.get("/health")
async def health_check():
    return {"status": "healthy", "version": settings.VERSION}
