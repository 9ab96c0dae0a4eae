"""
Body serialization for gateway requests and responses (JSON).
"""
import json
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict

from ..exceptions import UnexpectedError


def _default(value: Any) -> Any:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Decimal):
        return str(value)
    raise TypeError(f"Cannot serialize {type(value).__name__}")


def render_body(params: Dict[str, Any]) -> bytes:
    return json.dumps(params, default=_default, separators=(",", ":")).encode("utf-8")


def parse_body(content: bytes) -> Dict[str, Any]:
    """
    Parse a gateway response body.

    Empty bodies parse to an empty mapping.

    Raises:
        UnexpectedError: If the body is not a JSON object
    """
    if not content or not content.strip():
        return {}
    try:
        body = json.loads(content)
    except ValueError as e:
        raise UnexpectedError(f"Gateway returned an unreadable body: {e}") from e
    if not isinstance(body, dict):
        raise UnexpectedError("Gateway returned a body that is not an object")
    return body
