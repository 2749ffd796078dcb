"""Resolve LinkedIn Voyager profile responses into a stable profile model."""

from __future__ import annotations

__version__ = "0.1.0"
