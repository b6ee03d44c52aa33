"""
ColorScore Configuration
Manages environment variables and defaults for the scoring service.
"""
import os
from typing import List


class Config:
    """Configuration class for ColorScore services."""

    # Upload limits
    MAX_FILE_MB: int = int(os.environ.get("COLORSCORE_MAX_FILE_MB", "10"))

    # Pixel sampling grid (image is resized to exactly this size)
    SAMPLE_WIDTH: int = int(os.environ.get("COLORSCORE_SAMPLE_WIDTH", "100"))
    SAMPLE_HEIGHT: int = int(os.environ.get("COLORSCORE_SAMPLE_HEIGHT", "100"))

    # Clustering
    CLUSTER_COUNT: int = int(os.environ.get("COLORSCORE_CLUSTER_COUNT", "3"))
    CLUSTER_SEED: int = int(os.environ.get("COLORSCORE_CLUSTER_SEED", "42"))
    KMEANS_N_INIT: int = int(os.environ.get("COLORSCORE_KMEANS_N_INIT", "10"))
    KMEANS_MAX_ITER: int = int(os.environ.get("COLORSCORE_KMEANS_MAX_ITER", "300"))

    # Logging
    LOG_LEVEL: str = os.environ.get("COLORSCORE_LOG_LEVEL", "INFO")

    # CORS settings
    ALLOWED_ORIGINS: str = os.environ.get("COLORSCORE_ALLOWED_ORIGINS", "http://localhost:3000")

    # Observability
    METRICS_ENABLED: bool = bool(int(os.environ.get("COLORSCORE_METRICS_ENABLED", "1")))

    SERVICE_NAME: str = "colorscore"
    VERSION: str = "1.0.0"

    @classmethod
    def validate_cluster_count(cls, k: int) -> bool:
        """Validate number of clusters."""
        return k >= 0

    @classmethod
    def allowed_origins(cls) -> List[str]:
        """Parse comma-separated CORS origins."""
        return [origin.strip() for origin in cls.ALLOWED_ORIGINS.split(",") if origin.strip()]

    @classmethod
    def max_file_bytes(cls) -> int:
        return cls.MAX_FILE_MB * 1024 * 1024


# Global config instance
config = Config()
