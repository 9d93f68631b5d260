from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from dotenv import load_dotenv
import logging

# Load environment variables
load_dotenv()

from availability_proxy.core import settings, load_upstream_config
from availability_proxy.api import availability_router

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Fail fast: a missing token or anchor stops the process before it serves traffic
    app.state.upstream_config = load_upstream_config(settings)
    config = app.state.upstream_config
    logger.info(
        f"Upstream configured: {config.base_url}, day starts at "
        f"{config.day_start.isoformat()} {config.timezone.key}"
    )
    yield


app = FastAPI(
    title="Availability Proxy",
    description="Resolves unavailable dates for a room category from the Mews Connector API",
    version="1.0.0",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)

# Include routers
app.include_router(availability_router)

@app.get("/")
async def root():
    return {"message": "Availability proxy is running!"}

@app.get("/health")
async def health_check():
    return {"status": "healthy", "service": "availability-proxy"}

@app.get("/config/test")
async def test_config():
    """Test endpoint to verify configuration"""
    return {
        "environment": settings.environment,
        "mews_configured": bool(
            settings.mews_client_token and settings.mews_access_token and settings.mews_service_id
        ),
        "mews_connector_api_url": settings.mews_connector_api_url,
        "day_start": settings.mews_day_start,
        "timezone": settings.mews_timezone,
        "missing_category_policy": settings.missing_category_policy,
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.port)
