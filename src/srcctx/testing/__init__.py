from __future__ import annotations

from .corpus import generate_sources, normalize

__all__ = ["generate_sources", "normalize"]
