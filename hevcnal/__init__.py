"""Parsers for H.265/HEVC profile/tier/level, scaling list, SEI and SPS 3D extension syntax."""

__version__ = "0.1.0"