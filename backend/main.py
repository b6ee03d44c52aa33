from dotenv import load_dotenv

# Load environment variables before config is read
load_dotenv()

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from colorscore.api.v1 import router as v1_router
from colorscore.config import config
from colorscore.schemas import HealthResponse
from colorscore.utils.logging import get_logger

app = FastAPI(
    title="ColorScore Backend",
    description="Dominant color extraction and color harmony scoring",
    version=config.VERSION
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.allowed_origins(),
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(v1_router)

get_logger().info("ColorScore backend initialized",
                  extra={"version": config.VERSION,
                         "k": config.CLUSTER_COUNT,
                         "seed": config.CLUSTER_SEED})


@app.get("/healthz", response_model=HealthResponse)
def health_check():
    """Health check endpoint"""
    return HealthResponse(ok=True, version=config.VERSION, service=config.SERVICE_NAME)


@app.get("/")
def root():
    """Root endpoint"""
    return {
        "message": "ColorScore Backend API",
        "version": config.VERSION,
        "docs": "/docs"
    }
