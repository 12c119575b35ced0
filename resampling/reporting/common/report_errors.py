"""Structured error markers for per-split results.

A failing split must not break a run, but a bare string note makes failures
hard to filter. These helpers attach a small dict per error next to the note.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, TypedDict


class ReportError(TypedDict, total=False):
    """Lightweight error marker."""

    where: str
    error: str
    error_type: str
    context: Dict[str, Any]


def error_marker(
    *,
    where: str,
    exc: BaseException,
    context: Optional[Dict[str, Any]] = None,
) -> ReportError:
    return {
        "where": str(where),
        "error": str(exc),
        "error_type": type(exc).__name__,
        "context": dict(context) if context else {},
    }


def record_error(
    errors: List[Dict[str, Any]],
    notes: List[str],
    *,
    where: str,
    exc: BaseException,
    context: Optional[Dict[str, Any]] = None,
) -> None:
    """Append a marker to ``errors`` and a readable line to ``notes``."""
    errors.append(dict(error_marker(where=where, exc=exc, context=context)))
    notes.append(f"{where}: {type(exc).__name__}: {exc}")
