"""Observability – structlog configuration and logger helper."""
from beaver.observability.logging.factory import LoggerFactory
from beaver.observability.logging.processors import get_logger

__all__ = ["LoggerFactory", "get_logger"]
