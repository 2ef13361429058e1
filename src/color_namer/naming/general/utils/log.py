"""
log.py.

Does: Topic-filtered debug printer controlled by COLOR_NAMER_DEBUG_TOPICS (comma-sep or 'all').
Returns: Prints timestamped lines with topic + level. Used by the demo CLI and tests.
"""

import os
import sys
from datetime import datetime
from typing import TextIO

__all__ = ["debug", "reload_topics", "topic_enabled"]

TOPICS_ENV_VAR = "COLOR_NAMER_DEBUG_TOPICS"


def _load_topics() -> set[str]:
    raw = os.getenv(TOPICS_ENV_VAR, "")
    return {t.strip().lower() for t in raw.split(",") if t.strip()}


_DEBUG_TOPICS = _load_topics()


def reload_topics() -> None:
    """Does: Re-read COLOR_NAMER_DEBUG_TOPICS."""
    global _DEBUG_TOPICS
    _DEBUG_TOPICS = _load_topics()


def topic_enabled(topic: str) -> bool:
    """Does: True when no filter is set, the filter is 'all', or it names the topic."""
    key = topic.lower().strip()
    return not _DEBUG_TOPICS or "all" in _DEBUG_TOPICS or key in _DEBUG_TOPICS


def debug(
    msg: str,
    topic: str = "naming",
    *,
    level: str = "DEBUG",
    stream: TextIO | None = None,
) -> None:
    """Does: Print a timestamped line tagged with topic and level when the topic is enabled."""
    if not topic_enabled(topic):
        return
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(f"[{ts}] [{topic.lower().strip()}][{level.upper()}] {msg}", file=stream or sys.stderr)
