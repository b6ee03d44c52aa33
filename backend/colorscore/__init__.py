"""ColorScore: dominant color extraction and color harmony scoring."""

__version__ = "1.0.0"
