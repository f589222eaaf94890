# fixforge/extract/records.py
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Optional, Tuple

from ..models.fix import Fix, Replacement

log = logging.getLogger(__name__)

__all__ = ["parse_replacement", "parse_fix"]


def parse_replacement(raw: Mapping) -> Replacement:
    """
    Build a Replacement from one tool record. Raises KeyError, TypeError or
    ValueError when a field is missing or of the wrong kind.

    The insertion point is kept verbatim; an unknown value is only detected
    when the edit is rendered.
    """
    text = raw["replacement"]
    if not isinstance(text, str):
        raise TypeError(f"replacement text must be a string, got {type(text).__name__}")
    return Replacement(
        line=int(raw["line"]),
        column=int(raw["column"]),
        end_line=int(raw["endLine"]),
        end_column=int(raw["endColumn"]),
        precedence=int(raw["precedence"]),
        insertion_point=raw["insertionPoint"],
        replacement=text,
    )


def _parse_bundle(bundle: Any) -> Optional[Tuple[Replacement, ...]]:
    if not isinstance(bundle, Mapping):
        return None
    reps = bundle.get("replacements")
    if reps is None or isinstance(reps, (str, bytes, Mapping)):
        return None
    try:
        return tuple(parse_replacement(r) for r in reps)
    except (KeyError, TypeError, ValueError) as e:
        log.debug("Discarding malformed replacement bundle: %s", e)
        return None


def parse_fix(item: Any) -> Optional[Fix]:
    """
    Resolve a tool record into a Fix.

    Accepts a diagnostic (`{..., "fix": {"replacements": [...]}}`), a bare
    bundle (`{"replacements": [...]}`) or an existing Fix. Returns None for an
    absent item; anything else that carries no usable bundle becomes a Fix
    with `replacements=None`.
    """
    if item is None:
        return None
    if isinstance(item, Fix):
        return item
    if not isinstance(item, Mapping):
        return Fix(replacements=None, source=item)

    # A diagnostic wraps its bundle under "fix"; a falsy "fix" means the record
    # itself is the only place a bundle could be.
    bundle = item.get("fix") or item
    return Fix(
        replacements=_parse_bundle(bundle),
        code=item.get("code"),
        level=item.get("level"),
        message=item.get("message"),
        file=item.get("file"),
        source=item,
    )
