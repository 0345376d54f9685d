"""Registered, JSON-in/JSON-out entry points to the layout engine."""

from __future__ import annotations

from .registry import ApiFunction, call_api, get_api_functions, register_api
from .state import api_state

# Import endpoint modules so decorators run at module import time.
from . import calendar, meta  # noqa: F401

__all__ = ["ApiFunction", "api_state", "call_api", "get_api_functions", "register_api"]
