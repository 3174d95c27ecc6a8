# -*- coding: utf-8 -*-
"""Response decoding: wire JSON and headers -> typed results.

The service encodes booleans as the integers 0/1 and instants as Unix seconds
where 0 means "never". Both are decoded strictly: any other flag value is a
DecodeError and a zero timestamp becomes None, never the epoch.
"""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any, Optional, cast

from pushover_client.clients.schema import (
    ReceiptDetailsSchema,
    RecipientDetailsSchema,
    ResponseSchema,
)
from pushover_client.exceptions import DecodeError, InvalidHeadersError, ServiceError
from pushover_client.models.responses import (
    STATUS_OK,
    Limit,
    ReceiptDetails,
    RecipientDetails,
    Response,
)

LIMIT_HEADER = "X-Limit-App-Limit"
REMAINING_HEADER = "X-Limit-App-Remaining"
RESET_HEADER = "X-Limit-App-Reset"

# ASCII digits only: no sign "+", no "_" separators, no non-ASCII numerals
INT_HEADER_PATTERN = re.compile(r"-?[0-9]+")


def decode_json(body: bytes | str) -> dict[str, Any]:
    """Parse a JSON object body."""
    try:
        data = json.loads(body)
    except (ValueError, UnicodeDecodeError) as exc:
        raise DecodeError("pushover: malformed JSON response", cause=exc) from exc
    if not isinstance(data, dict):
        raise DecodeError(
            f"pushover: expected a JSON object, got {type(data).__name__}"
        )
    return cast(dict[str, Any], data)


def _int(payload: Mapping[str, Any], key: str) -> int:
    value = payload.get(key, 0)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError(f"pushover: field {key!r} must be an integer, got {value!r}")
    return value


def _str(payload: Mapping[str, Any], key: str) -> str:
    value = payload.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise DecodeError(f"pushover: field {key!r} must be a string, got {value!r}")
    return value


def _str_list(payload: Mapping[str, Any], key: str) -> list[str]:
    value = payload.get(key)
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise DecodeError(f"pushover: field {key!r} must be a list of strings")
    return list(cast(list[str], value))


def decode_flag(payload: Mapping[str, Any], key: str) -> bool:
    """Decode a 0/1 integer flag."""
    value = _int(payload, key)
    if value not in (0, 1):
        raise DecodeError(f"pushover: flag {key!r} must be 0 or 1, got {value}")
    return value == 1


def decode_timestamp(payload: Mapping[str, Any], key: str) -> Optional[datetime]:
    """Decode Unix seconds into an aware UTC datetime; 0 (or absent) is None."""
    value = _int(payload, key)
    if value == 0:
        return None
    try:
        return datetime.fromtimestamp(value, tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as exc:
        raise DecodeError(
            f"pushover: timestamp {key!r} out of range: {value}", cause=exc
        ) from exc


def check_status(payload: Mapping[str, Any], *, error_cls: type[ServiceError] = ServiceError) -> None:
    """Raise error_cls carrying the service errors when status is not 1.

    A missing status is treated as a failure as well.
    """
    status = _int(payload, "status")
    if status != STATUS_OK:
        raise error_cls(
            _str_list(payload, "errors"),
            request=_str(payload, "request") or None,
            status=status,
        )


def _single_int_header(headers: Mapping[str, str], name: str) -> int:
    raw = headers.get(name)
    if raw is None:
        raise InvalidHeadersError(name)
    # Repeated headers are folded into one comma-joined value by the transport.
    value = raw.strip()
    if INT_HEADER_PATTERN.fullmatch(value) is None:
        raise InvalidHeadersError(name)
    return int(value)


def decode_limit(headers: Mapping[str, str]) -> Limit:
    """Decode the app-limit headers. All three must be present, single and integer."""
    total = _single_int_header(headers, LIMIT_HEADER)
    remaining = _single_int_header(headers, REMAINING_HEADER)
    reset = _single_int_header(headers, RESET_HEADER)
    try:
        next_reset = datetime.fromtimestamp(reset, tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as exc:
        raise InvalidHeadersError(RESET_HEADER, cause=exc) from exc
    return Limit(total=total, remaining=remaining, next_reset=next_reset)


def decode_response(payload: Mapping[str, Any], *, limit: Optional[Limit] = None) -> Response:
    """Decode a plain status response. The limit is attached only when given."""
    data = cast(ResponseSchema, payload)
    return Response(
        status=_int(data, "status"),
        request=_str(data, "request"),
        errors=_str_list(data, "errors"),
        receipt=_str(data, "receipt"),
        limit=limit,
    )


def decode_receipt_details(payload: Mapping[str, Any]) -> ReceiptDetails:
    data = cast(ReceiptDetailsSchema, payload)
    return ReceiptDetails(
        status=_int(data, "status"),
        acknowledged=decode_flag(data, "acknowledged"),
        acknowledged_at=decode_timestamp(data, "acknowledged_at"),
        acknowledged_by=_str(data, "acknowledged_by"),
        acknowledged_by_device=_str(data, "acknowledged_by_device"),
        last_delivered_at=decode_timestamp(data, "last_delivered_at"),
        expired=decode_flag(data, "expired"),
        expires_at=decode_timestamp(data, "expires_at"),
        called_back=decode_flag(data, "called_back"),
        called_back_at=decode_timestamp(data, "called_back_at"),
        request=_str(data, "request"),
    )


def decode_recipient_details(payload: Mapping[str, Any]) -> RecipientDetails:
    data = cast(RecipientDetailsSchema, payload)
    return RecipientDetails(
        status=_int(data, "status"),
        group=decode_flag(data, "group"),
        devices=_str_list(data, "devices"),
        licenses=_str_list(data, "licenses"),
        request=_str(data, "request"),
        errors=_str_list(data, "errors"),
    )
