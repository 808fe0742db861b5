"""Core utilities and configurations."""

from .context import get_engine

__all__ = ["get_engine"]
