from __future__ import annotations

from .atomic_write import write_text_atomic

__all__ = ["write_text_atomic"]
