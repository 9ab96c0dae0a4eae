"""
Query Codec

Encodes signed field sets as query strings and decodes, verifies and
unflattens query strings coming back from the gateway.

Wire format:
    key1=value1&key2=value2&...&hash=<hex40>

Keys are flattened paths (credit_card.billing_address.postal_code,
items[0].name); values are percent-encoded.
"""
import logging
import re
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union
from urllib.parse import unquote_plus

from ..exceptions import (
    AuthenticationError,
    AuthorizationError,
    DecodeError,
    DownForMaintenanceError,
    ForgedQueryStringError,
    NotFoundError,
    ServerError,
    UnexpectedError,
    UpgradeRequiredError,
)
from ..models.payloads import RedirectQueryString, SignedPayload
from .signature_service import SignatureService, quote_key, quote_value

logger = logging.getLogger(__name__)


HASH_FIELD = "hash"
SUCCESS_STATUSES = (200, 201)
VALIDATION_STATUS = 422

_PATH_TOKEN = re.compile(r"([^.\[\]]+)|\[(\d+)\]")


# ============================================================================
# Flatten / Unflatten
# ============================================================================

def _scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def flatten(tree: Mapping[str, Any], parent: Optional[str] = None) -> Dict[str, str]:
    """
    Flatten a params tree into path -> string pairs.

    Mapping children are joined with ".", sequence items with "[i]". None
    values are dropped.

        flatten({"credit_card": {"number": "4111", "options": {"verify_card": True}}})
        # {"credit_card.number": "4111", "credit_card.options.verify_card": "true"}
    """
    data: Dict[str, str] = {}
    for key, value in tree.items():
        path = f"{parent}.{key}" if parent else str(key)
        data.update(_flatten_node(value, path))
    return data


def _flatten_node(value: Any, path: str) -> Dict[str, str]:
    if value is None:
        return {}
    if isinstance(value, Mapping):
        return flatten(value, path)
    if isinstance(value, (list, tuple)):
        data: Dict[str, str] = {}
        for index, item in enumerate(value):
            data.update(_flatten_node(item, f"{path}[{index}]"))
        return data
    return {path: _scalar(value)}


def _parse_path(path: str) -> List[Union[str, int]]:
    segments: List[Union[str, int]] = []
    position = 0
    for match in _PATH_TOKEN.finditer(path):
        gap = path[position:match.start()]
        if gap and (gap != "." or position == 0):
            raise DecodeError(f"Invalid field path: {path!r}")
        name, index = match.groups()
        segments.append(int(index) if index is not None else name)
        position = match.end()
    if not segments or isinstance(segments[0], int) or position != len(path):
        raise DecodeError(f"Invalid field path: {path!r}")
    return segments


def unflatten(fields: Mapping[str, str]) -> Dict[str, Any]:
    """
    Rebuild the nested params tree from flattened paths.

    Inverse of flatten(). Sequence items come back as lists ordered by index;
    indexes must run 0..n-1 without gaps.

    Raises:
        DecodeError: If a path is malformed, two paths conflict, or sequence
            indexes have gaps
    """
    root: Dict[Any, Any] = {}
    for path, value in fields.items():
        segments = _parse_path(path)
        node = root
        for segment in segments[:-1]:
            child = node.setdefault(segment, {})
            if not isinstance(child, dict):
                raise DecodeError(f"Conflicting field path: {path!r}")
            node = child
        leaf = segments[-1]
        if leaf in node:
            raise DecodeError(f"Conflicting field path: {path!r}")
        node[leaf] = value
    return _listify(root)


def _listify(node: Any) -> Any:
    # Index-keyed dicts become lists
    if not isinstance(node, dict):
        return node
    if node and all(isinstance(key, int) for key in node):
        if sorted(node) != list(range(len(node))):
            raise DecodeError(f"Sequence indexes are not contiguous from 0: {sorted(node)}")
        return [_listify(node[key]) for key in sorted(node)]
    if any(isinstance(key, int) for key in node):
        raise DecodeError("Field path mixes sequence and mapping items")
    return {key: _listify(value) for key, value in node.items()}


# ============================================================================
# Encode / Decode
# ============================================================================

def encode(payload: SignedPayload) -> str:
    """
    Serialize a signed payload as a query string.

    Field order is the payload's insertion order; the signature goes last.
    """
    pairs = [f"{quote_key(key)}={quote_value(value)}" for key, value in payload.data.items()]
    pairs.append(f"{HASH_FIELD}={payload.signature}")
    return "&".join(pairs)


def _split(query_string: str) -> List[Tuple[str, Optional[str]]]:
    pairs: List[Tuple[str, Optional[str]]] = []
    for chunk in query_string.split("&"):
        if not chunk:
            continue
        key, separator, value = chunk.partition("=")
        pairs.append((key, value if separator else None))
    return pairs


def decode(query_string: str, private_key: str) -> SignedPayload:
    """
    Decode and authenticate a signed query string.

    The signature is checked over the raw pairs before anything else is
    interpreted, so any change to the signed portion fails authentication
    rather than being partially processed.

    Args:
        query_string: Query string without the leading "?"
        private_key: Merchant private key

    Returns:
        SignedPayload with percent-decoded keys and values

    Raises:
        DecodeError: Missing or duplicated hash, pair without "=", or
            duplicated field
        ForgedQueryStringError: Signature does not match
    """
    if not query_string:
        raise DecodeError("Query string is empty")

    pairs = _split(query_string.lstrip("?"))
    hashes = [value for key, value in pairs if key == HASH_FIELD]
    if not hashes:
        raise DecodeError("Query string has no hash field")
    if len(hashes) > 1:
        raise DecodeError("Query string has more than one hash field")

    content = [(key, value) for key, value in pairs if key != HASH_FIELD]
    if not SignatureService(private_key).is_valid(content, hashes[0] or ""):
        logger.warning("Rejected query string with invalid signature")
        raise ForgedQueryStringError()

    data: Dict[str, str] = {}
    for key, value in pairs:
        if key == HASH_FIELD:
            continue
        if value is None:
            raise DecodeError(f"Malformed pair in query string: {key!r}")
        field_name = unquote_plus(key)
        if field_name in data:
            raise DecodeError(f"Duplicate field in query string: {field_name!r}")
        data[field_name] = unquote_plus(value)

    return SignedPayload(data=data, signature=hashes[0].lower())


# ============================================================================
# Redirect Query Strings
# ============================================================================

def is_error_status(status: int) -> bool:
    return status not in SUCCESS_STATUSES and status != VALIDATION_STATUS


def raise_exception_from_status(status: int, message: Optional[str] = None) -> None:
    """
    Raise the exception for an error status.

    Unrecognised statuses raise UnexpectedError rather than being mapped to a
    business outcome.
    """
    if status == 401:
        raise AuthenticationError(message)
    elif status == 403:
        raise AuthorizationError(message)
    elif status == 404:
        raise NotFoundError(message)
    elif status == 426:
        raise UpgradeRequiredError(message)
    elif status == 500:
        raise ServerError(message)
    elif status == 503:
        raise DownForMaintenanceError(message)
    else:
        raise UnexpectedError(
            f"Unexpected HTTP status {status}" + (f": {message}" if message else ""),
            details={"http_status": status}
        )


def parse_redirect_query_string(query_string: str, private_key: str) -> RedirectQueryString:
    """
    Decode the query string the gateway appended to the redirect URL.

    Returns:
        RedirectQueryString for success (200/201) and validation (422) statuses

    Raises:
        DecodeError: Malformed query string, or http_status missing/not a number
        ForgedQueryStringError: Signature does not match
        TransportError, AuthenticationError, AuthorizationError, NotFoundError:
            For error statuses reported by the gateway
    """
    payload = decode(query_string, private_key)

    raw_status = payload.data.get("http_status")
    if raw_status is None:
        raise DecodeError("Redirect query string has no http_status field")
    try:
        http_status = int(raw_status)
    except ValueError:
        raise DecodeError(f"Invalid http_status: {raw_status!r}")

    message = payload.data.get("message")
    if is_error_status(http_status):
        logger.warning(f"Gateway redirected with error status {http_status}: {message}")
        raise_exception_from_status(http_status, message)

    return RedirectQueryString(
        http_status=http_status,
        id=payload.data.get("id"),
        kind=payload.data.get("kind"),
        message=message,
        fields=unflatten(payload.data),
    )
