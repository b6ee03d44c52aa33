"""
Dominant color clustering.

The orchestrator depends only on the ``ColorClusterer`` protocol so tests can
inject a deterministic fake. ``KMeansClusterer`` is the production
implementation backed by scikit-learn.
"""

from typing import Protocol

import numpy as np
from loguru import logger
from sklearn.cluster import KMeans

from colorscore.config import config


class ColorClusterer(Protocol):
    """Capability interface: group pixel samples into k centroids."""

    def cluster(self, points: np.ndarray, k: int, seed: int) -> np.ndarray:
        """
        Args:
            points: Pixel samples (N, 3)
            k: Number of centroids to return
            seed: Random seed; identical input and seed must give identical output

        Returns:
            Centroids (k, 3) float64, possibly fractional
        """
        ...


def pad_degenerate_palette(points: np.ndarray, k: int) -> np.ndarray:
    """
    Build k centroids from samples with at most k distinct colors.

    Distinct colors are ordered by frequency (ties by color value) and the most
    frequent color is repeated to fill the remaining slots.

    Args:
        points: Pixel samples (N, 3) with N > 0
        k: Number of centroids

    Returns:
        Centroids (k, 3) float64
    """
    unique_colors, counts = np.unique(points, axis=0, return_counts=True)
    # Stable sort keeps np.unique's lexicographic order among ties
    order = np.argsort(-counts, kind="stable")
    ordered = unique_colors[order].astype(np.float64)

    if len(ordered) < k:
        filler = np.repeat(ordered[:1], k - len(ordered), axis=0)
        ordered = np.vstack([ordered, filler])

    return ordered[:k]


class KMeansClusterer:
    """K-means clustering of RGB samples using scikit-learn."""

    def __init__(self, n_init: int = None, max_iter: int = None):
        self.n_init = n_init if n_init is not None else config.KMEANS_N_INIT
        self.max_iter = max_iter if max_iter is not None else config.KMEANS_MAX_ITER

    def cluster(self, points: np.ndarray, k: int, seed: int) -> np.ndarray:
        """
        Cluster pixel samples into k centroids.

        Raises:
            ValueError: If k is negative or there are no samples to cluster
        """
        if k < 0:
            raise ValueError(f"Cluster count must be non-negative, got {k}")
        if k == 0:
            return np.empty((0, 3), dtype=np.float64)

        samples = np.asarray(points)
        if samples.ndim != 2 or samples.shape[1] != 3 or len(samples) == 0:
            raise ValueError(f"Expected non-empty (N, 3) pixel samples, got shape {samples.shape}")

        n_unique = len(np.unique(samples, axis=0))
        if n_unique <= k:
            logger.debug(f"Degenerate palette: {n_unique} distinct colors for k={k}")
            return pad_degenerate_palette(samples, k)

        logger.debug(f"Running KMeans with k={k}, seed={seed}, {len(samples)} samples")
        kmeans = KMeans(
            n_clusters=k,
            random_state=seed,
            n_init=self.n_init,
            max_iter=self.max_iter
        )
        kmeans.fit(samples.astype(np.float64))
        return np.asarray(kmeans.cluster_centers_, dtype=np.float64)
