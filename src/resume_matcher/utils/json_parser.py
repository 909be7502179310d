"""Utility to extract a JSON object from LLM responses."""

from __future__ import annotations

import json
import re

_FENCE_OPEN = re.compile(r"^```(?:json)?\s*", re.IGNORECASE)
_FENCE_CLOSE = re.compile(r"```\s*$")


def extract_json(text: str) -> dict:
    """Extract a JSON object from an LLM response.

    Tries in order:
    1. Direct json.loads after stripping ```json fences
    2. First '{' to last '}'
    """
    stripped = _FENCE_CLOSE.sub("", _FENCE_OPEN.sub("", text.strip())).strip()

    try:
        data = json.loads(stripped)
    except json.JSONDecodeError:
        data = _extract_braces(stripped)

    if not isinstance(data, dict):
        raise ValueError(f"Could not extract JSON object from text: {text[:200]}...")
    return data


def _extract_braces(text: str) -> dict | None:
    """Try to extract JSON object from first '{' to last '}'."""
    start = text.find("{")
    end = text.rfind("}")
    if start != -1 and end != -1 and end > start:
        try:
            return json.loads(text[start : end + 1])
        except json.JSONDecodeError:
            pass
    return None
