"""
Test configuration and fixtures for ColorScore tests.
"""
import pytest
from fastapi.testclient import TestClient

# Import the main app
from main import app
from colorscore.utils.metrics import reset_metrics as _reset_metrics
from synthetic_images import encode_image, make_quadrant_image, make_solid_image


@pytest.fixture
def test_client():
    """Create test client for the FastAPI app."""
    return TestClient(app)


@pytest.fixture
def solid_png_bytes():
    """PNG bytes of a solid steel-blue image."""
    return encode_image(make_solid_image((30, 120, 200)))


@pytest.fixture
def quadrant_png_bytes():
    """PNG bytes of a four-color image."""
    return encode_image(make_quadrant_image())


@pytest.fixture(autouse=True)
def reset_metrics():
    """Reset metrics before each test."""
    _reset_metrics()
