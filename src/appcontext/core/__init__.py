"""Core settings for the bootstrap layer."""

from .config import ContextSettings

__all__ = ["ContextSettings"]
