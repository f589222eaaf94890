# fixforge/extract/documents.py
import json
from collections.abc import Mapping
from typing import Any, Dict, List

from ..errors.extract import ExtractError

STDIN_FILE = "-"


def extract_fixes(document: Any) -> List[Any]:
    """
    Return the fix records of one analysis-tool report.

    `document` may be raw JSON text (str/bytes), a ShellCheck ``json1``
    object (``{"comments": [...]}``), or a plain list of records as produced
    by ``--format=json``. Records are returned as-is, in report order.
    """
    if isinstance(document, (bytes, bytearray)):
        document = document.decode("utf-8")
    if isinstance(document, str):
        try:
            document = json.loads(document)
        except json.JSONDecodeError as e:
            raise ExtractError(f"Tool output is not valid JSON: {e}") from e

    if isinstance(document, Mapping):
        if "comments" not in document:
            raise ExtractError("Expected a 'comments' key in the tool report")
        document = document["comments"]
    if not isinstance(document, list):
        raise ExtractError(f"Expected a list of fix records, got {type(document).__name__}")
    return document


def group_fixes_by_file(records: List[Any]) -> Dict[str, List[Any]]:
    """
    Group records by their ``file`` field, keeping first-seen file order and
    report order within each file. Records without a file go under "-".
    """
    groups: Dict[str, List[Any]] = {}
    for rec in records:
        path = rec.get("file") if isinstance(rec, Mapping) else None
        groups.setdefault(path or STDIN_FILE, []).append(rec)
    return groups
