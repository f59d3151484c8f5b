from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from kurobako_solver.errors import MessageDecodeError, TransportError, UnknownMessageTypeError
from kurobako_solver.protocol.messages import (
    INBOUND_ADAPTER,
    INBOUND_TYPES,
    OUTBOUND_ADAPTER,
    OUTBOUND_TYPES,
    InboundMessage,
    OutboundMessage,
)


def compact_json_bytes(obj: Any) -> bytes:
    return json.dumps(obj, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


def encode_message(message: BaseModel) -> bytes:
    try:
        return compact_json_bytes(message.model_dump(mode="json"))
    except (PydanticSerializationError, TypeError, ValueError) as exc:
        raise TransportError(f"cannot encode {type(message).__name__}: {exc}") from exc


def decode_inbound(line: bytes) -> InboundMessage:
    return _decode(line, INBOUND_TYPES, INBOUND_ADAPTER)


def decode_outbound(line: bytes) -> OutboundMessage:
    return _decode(line, OUTBOUND_TYPES, OUTBOUND_ADAPTER)


def parse_object(line: bytes) -> dict[str, Any]:
    try:
        payload = json.loads(line)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise TransportError(f"malformed message line: {exc}") from exc
    if not isinstance(payload, dict):
        raise TransportError(f"message must be a JSON object, got {type(payload).__name__}")
    return payload


def _decode(line: bytes, allowed: frozenset[str], adapter: TypeAdapter[Any]) -> Any:
    payload = parse_object(line)
    message_type = payload.get("type")
    if not isinstance(message_type, str) or message_type not in allowed:
        raise UnknownMessageTypeError(message_type)
    try:
        return adapter.validate_python(payload)
    except ValidationError as exc:
        detail = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc'][1:]) or '<root>'}: {err['msg']}"
            for err in exc.errors()
        )
        raise MessageDecodeError(message_type, detail) from exc
