"""
ColorScore Colors Module

Provides RGB to HSV conversion, dominant color clustering, and pairwise
harmony scoring for palettes extracted from uploaded images.
"""
