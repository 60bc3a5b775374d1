"""Helpers for reading and seeding badge files in tests."""

from __future__ import annotations

import json
from typing import Any


def write_badges(path, badges: dict[str, Any]) -> None:
    path.write_text(json.dumps(badges), encoding="utf-8")


def read_badges(path) -> Any:
    return json.loads(path.read_text(encoding="utf-8"))
