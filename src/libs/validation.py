"""
Formatting of pydantic validation errors for error envelopes.
"""

from typing import Any, Dict, Iterable, List


def error_path(loc: Iterable[Any]) -> str:
    # FastAPI prefixes request locations ("body", "query"); keep them
    return ".".join(str(part) for part in loc)


def validation_error_details(errors: Iterable[Dict[str, Any]]) -> Dict[str, List[Dict[str, str]]]:
    """{"errors": [{"path", "message"}]} from pydantic's error list"""
    return {
        "errors": [
            {"path": error_path(error.get("loc", ())), "message": error.get("msg", "Invalid value")}
            for error in errors
        ]
    }
