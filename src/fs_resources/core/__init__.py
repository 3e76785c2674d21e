"""Core utilities and shared components for fs-resources."""

from .config import settings
from .exceptions import FSResourcesError, ValidationError
from .observability import get_logger, get_tracer

__all__ = ["settings", "FSResourcesError", "ValidationError", "get_logger", "get_tracer"]
