"""
Color harmony analysis orchestrator.

Runs the full pipeline for one image: decode and downsample → k-means
clustering → HSV conversion → pairwise harmony scoring → rounding. Every
intermediate value is local to the call; the function holds no state between
requests.
"""

import math
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence

import numpy as np

from colorscore.config import config
from colorscore.services.colors.clustering import ColorClusterer, KMeansClusterer
from colorscore.services.colors.conversion import centroids_to_hsv
from colorscore.services.colors.harmony import (
    DEFAULT_WEIGHTS, HarmonyWeights, mean_pair_score, score_palette, score_palette_breakdown
)
from colorscore.services.errors import InvalidClusterCountError, MissingInputError, ProcessingError
from colorscore.services.imaging import extract_pixels, validate_upload_size
from colorscore.utils.ids import generate_request_id
from colorscore.utils.logging import get_logger

PixelSource = Callable[[bytes], np.ndarray]


@dataclass
class ScoreResult:
    """Final harmony score and display palette."""
    score: float
    colors: List[List[int]] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"score": self.score, "colors": [list(c) for c in self.colors]}


def round_channel(value: float) -> int:
    """Round a centroid channel half-up and clamp it to [0, 255]."""
    return max(0, min(255, int(math.floor(float(value) + 0.5))))


def round_centroids(centroids: Sequence[Sequence[float]]) -> List[List[int]]:
    """Round each centroid to integer RGB for display."""
    return [[round_channel(channel) for channel in centroid[:3]] for centroid in centroids]


def score_centroids(centroids: Sequence[Sequence[float]],
                    weights: HarmonyWeights = DEFAULT_WEIGHTS) -> ScoreResult:
    """
    Score an RGB palette without touching any image.

    Args:
        centroids: RGB centroids, channels in [0, 255]
        weights: Sub-score weights

    Returns:
        ScoreResult with the score rounded to 2 decimals
    """
    hsv_colors = centroids_to_hsv(centroids)
    final_score = score_palette(hsv_colors, weights)
    return ScoreResult(score=round(final_score, 2), colors=round_centroids(centroids))


def analyze(
    image_bytes: Optional[bytes],
    k: Optional[int] = None,
    seed: Optional[int] = None,
    clusterer: Optional[ColorClusterer] = None,
    pixel_source: Optional[PixelSource] = None,
    weights: HarmonyWeights = DEFAULT_WEIGHTS,
    request_id: Optional[str] = None
) -> ScoreResult:
    """
    Analyze an image and score the harmony of its dominant colors.

    Args:
        image_bytes: Raw uploaded image bytes
        k: Number of dominant colors (default from config)
        seed: Clustering seed (default from config)
        clusterer: Clustering capability (default KMeansClusterer)
        pixel_source: Callable decoding bytes to (N, 3) RGB samples
        weights: Sub-score weights
        request_id: Request ID for log correlation

    Returns:
        ScoreResult with K rounded colors and the rounded score

    Raises:
        MissingInputError: If no image bytes were provided
        FileTooLargeError: If the upload exceeds the size limit
        InvalidClusterCountError: If k is negative
        ProcessingError: For any failure while decoding, clustering or scoring
    """
    if not image_bytes:
        raise MissingInputError("File is required.")
    validate_upload_size(image_bytes)

    k = config.CLUSTER_COUNT if k is None else k
    if not config.validate_cluster_count(k):
        raise InvalidClusterCountError(f"Invalid cluster count: {k}")
    seed = config.CLUSTER_SEED if seed is None else seed
    clusterer = clusterer if clusterer is not None else KMeansClusterer()
    pixel_source = pixel_source if pixel_source is not None else extract_pixels
    request_id = request_id or generate_request_id("score")

    log = get_logger()
    extra = {"request_id": request_id}
    start_time = time.time()

    try:
        # 1) Decode and downsample
        pixels = pixel_source(image_bytes)
        decode_ms = (time.time() - start_time) * 1000
        log.debug(f"Extracted {len(pixels)} pixel samples",
                  extra={**extra, "ms_decode": round(decode_ms, 2)})

        # 2) Cluster into k dominant colors
        cluster_start = time.time()
        centroids = np.asarray(clusterer.cluster(pixels, k, seed), dtype=np.float64).reshape(-1, 3)
        if len(centroids) != k:
            raise RuntimeError(f"Clusterer returned {len(centroids)} centroids, expected {k}")
        if not np.all(np.isfinite(centroids)):
            raise RuntimeError("Clusterer returned non-finite centroids")
        cluster_ms = (time.time() - cluster_start) * 1000
        log.debug(f"Clustering complete: {k} colors",
                  extra={**extra, "ms_kmeans": round(cluster_ms, 2)})

        # 3) Convert and score all pairs
        hsv_colors = centroids_to_hsv(centroids)
        breakdown = score_palette_breakdown(hsv_colors, weights)
        for pair in breakdown:
            log.debug(f"Pair ({pair.i},{pair.j}) scored {pair.score:.2f}",
                      extra={**extra,
                             "hue_distance": round(pair.hue_distance, 2),
                             "hue": pair.hue_score,
                             "value": round(pair.value_score, 2),
                             "saturation": round(pair.saturation_score, 2)})
        final_score = mean_pair_score(breakdown)

        result = ScoreResult(score=round(final_score, 2), colors=round_centroids(centroids))

    except Exception as e:
        log.exception(f"Analysis failed: {type(e).__name__}: {str(e)}", extra=extra)
        raise ProcessingError(request_id=request_id) from e

    total_ms = (time.time() - start_time) * 1000
    log.info(f"Analysis complete: score={result.score}",
             extra={**extra, "k": k, "ms_total": round(total_ms, 2)})
    return result
