"""Helpers for ffmpeg frame sequences, float RGBA image I/O and raw-mode terminal control."""

__version__ = "0.1.0"
__all__ = ["frames", "pixels", "terminal"]