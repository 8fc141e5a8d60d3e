"""Observability – structured logging helpers."""
from shop_grid.observability.logging.factory import JsonLoggerFactory, get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
