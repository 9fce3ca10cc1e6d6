"""Capture infrared pulse trains, decode Sony signals and render them as text."""

__version__ = "1.0.0"

__all__ = ["core", "debug", "protocol", "sony"]