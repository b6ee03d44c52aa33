"""
Test the /api/score upload endpoint.
"""
import pytest

from colorscore.config import Config
from synthetic_images import encode_image, make_quadrant_image


def test_score_solid_image(test_client, solid_png_bytes):
    """Solid color image degenerates to identical centroids and scores 70."""
    files = {"file": ("solid.png", solid_png_bytes, "image/png")}

    response = test_client.post("/api/score", files=files)

    assert response.status_code == 200
    data = response.json()
    assert data == {"score": 70.0, "colors": [[30, 120, 200]] * 3}


def test_score_jpeg_image(test_client):
    """Any decodable format is accepted."""
    jpeg_bytes = encode_image(make_quadrant_image(), fmt="JPEG")
    files = {"file": ("outfit.jpg", jpeg_bytes, "image/jpeg")}

    response = test_client.post("/api/score", files=files)

    assert response.status_code == 200
    data = response.json()

    # Check response structure
    assert set(data.keys()) == {"score", "colors"}
    assert 0.0 <= data["score"] <= 100.0
    assert round(data["score"], 2) == data["score"]
    assert len(data["colors"]) == 3
    for color in data["colors"]:
        assert len(color) == 3
        assert all(isinstance(c, int) and 0 <= c <= 255 for c in color)


def test_score_is_reproducible(test_client, quadrant_png_bytes):
    files = {"file": ("quadrants.png", quadrant_png_bytes, "image/png")}

    first = test_client.post("/api/score", files=files).json()
    second = test_client.post("/api/score", files=files).json()

    assert first == second


def test_missing_file(test_client):
    """No file field → 400 before any processing."""
    response = test_client.post("/api/score", data={"note": "no file here"})

    assert response.status_code == 400
    assert response.json() == {"error": "File is required."}


def test_text_field_instead_of_file(test_client):
    """A plain form value under the file key is treated as no upload."""
    response = test_client.post("/api/score", data={"file": "not-an-upload"})

    assert response.status_code == 400
    assert response.json() == {"error": "File is required."}


def test_empty_file(test_client):
    files = {"file": ("empty.png", b"", "image/png")}

    response = test_client.post("/api/score", files=files)

    assert response.status_code == 400
    assert response.json() == {"error": "File is required."}


def test_non_image_file(test_client):
    """Undecodable bytes surface only as a generic failure."""
    files = {"file": ("notes.txt", b"this is not an image at all", "text/plain")}

    response = test_client.post("/api/score", files=files)

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to process image."}


def test_file_too_large(test_client, solid_png_bytes, monkeypatch):
    monkeypatch.setattr(Config, "MAX_FILE_MB", 0)
    files = {"file": ("solid.png", solid_png_bytes, "image/png")}

    response = test_client.post("/api/score", files=files)

    assert response.status_code == 413
    assert response.json() == {"error": "File too large."}


def test_metrics_track_requests(test_client, solid_png_bytes):
    test_client.post("/api/score", files={"file": ("solid.png", solid_png_bytes, "image/png")})
    test_client.post("/api/score", files={"file": ("bad.png", b"garbage bytes", "image/png")})
    test_client.post("/api/score", data={"note": "no file"})

    response = test_client.get("/api/metrics")

    assert response.status_code == 200
    data = response.json()
    counters = data["counters"]
    assert counters["score_requests_total"] == 3
    assert counters["score_succeeded_total"] == 1
    assert counters["score_failed_total_processing"] == 1
    assert counters["score_failed_total_missing_input"] == 1
    assert data["score_stats"]["count"] == 1
    assert data["score_stats"]["mean"] == pytest.approx(70.0)
    assert data["timing_stats"]["score_duration_ms"]["count"] == 1
