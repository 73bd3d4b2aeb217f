import json
import re
from typing import Any, Callable, Dict, Optional, Sequence

# Greedy: spans from the first "{" to the last "}" in the text
_GREEDY_OBJECT = re.compile(r"\{[\s\S]*\}")
_CODE_FENCE = re.compile(r"```\s*")
_LEADING_PROSE = re.compile(r"^[^{]*")
_TRAILING_PROSE = re.compile(r"[^}]*$")

Strategy = Callable[[str], Optional[str]]


def greedy_brace_match(text: str) -> Optional[str]:
    """Return the widest `{...}` substring, or None when there is none."""
    match = _GREEDY_OBJECT.search(text)
    return match.group(0) if match else None


def strip_artifacts(text: str) -> Optional[str]:
    """
    Remove markdown code fences, any prose before the first "{" and any prose
    after the last "}". Returns the trimmed residue, or None if nothing is left.
    """
    residue = _CODE_FENCE.sub("", text)
    residue = _LEADING_PROSE.sub("", residue, count=1)
    residue = _TRAILING_PROSE.sub("", residue, count=1).strip()
    return residue or None


def slice_outer_braces(text: str) -> Optional[str]:
    """Slice the raw text from its first "{" to its last "}" inclusive."""
    first = text.find("{")
    last = text.rfind("}")
    if first == -1 or last == -1 or last <= first:
        return None
    return text[first:last + 1]


# Tried in order; the first candidate that parses to a JSON object wins
EXTRACTION_STRATEGIES: Sequence[Strategy] = (
    greedy_brace_match,
    strip_artifacts,
    slice_outer_braces,
)


def parse_json_object(candidate: Optional[str]) -> Optional[Dict[str, Any]]:
    if not candidate or not candidate.startswith("{"):
        return None
    try:
        value = json.loads(candidate)
    except ValueError:
        return None
    return value if isinstance(value, dict) else None


def extract_json_object(
    text: Optional[str],
    strategies: Sequence[Strategy] = EXTRACTION_STRATEGIES,
) -> Optional[Dict[str, Any]]:
    """
    Recover a JSON object from free-form model output.

    The text may contain prose, code fences or trailing commentary. Returns the
    parsed object, or None when no strategy produces parseable JSON.
    """
    if not text:
        return None
    for strategy in strategies:
        parsed = parse_json_object(strategy(text))
        if parsed is not None:
            return parsed
    return None
