"""Type aliases for JSON-shaped records (retry history, log entries)."""

from __future__ import annotations

from typing import Any

JsonDict = dict[str, Any]
