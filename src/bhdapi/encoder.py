"""Flatten request models into the service's JSON body."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from pydantic import BaseModel

from bhdapi.exceptions import EncodeError

logger = logging.getLogger(__name__)

# Wire name that marks a field as never sent.
SKIP_WIRE_NAME = "-"


def encode_params(params: BaseModel, action: str, *, rss_key: str | None = None) -> dict[str, Any]:
    """Build the request body for *action* from a request model.

    Every declared field is emitted under its wire name (the field alias, or
    the attribute name) unless it holds a zero value. Lists are joined with
    commas, flags become ``1`` and enums their value.

    Args:
        params: A request model such as ``SearchParams``.
        action: The RPC-like method name, e.g. ``"search"``.
        rss_key: Injected as ``rsskey`` when non-empty.

    Raises:
        EncodeError: If *params* is not a model or a field has an unsupported type.
    """
    if not isinstance(params, BaseModel):
        raise EncodeError(f"params must be a pydantic model, got {type(params).__name__}")

    body: dict[str, Any] = {"action": action}
    if rss_key:
        body["rsskey"] = rss_key

    for name, info in type(params).model_fields.items():
        wire_name = info.alias or name
        if info.exclude or wire_name in ("", SKIP_WIRE_NAME):
            continue
        try:
            value, present = _encode_value(getattr(params, name))
        except EncodeError as exc:
            raise EncodeError(f"invalid field {name}: {exc}") from exc
        if present:
            body[wire_name] = value

    logger.debug("encoded %s request with %d key(s)", action, len(body))
    return body


def _encode_value(value: Any) -> tuple[Any, bool]:
    """Return the wire value and whether it is non-zero."""
    if value is None:
        return None, False
    if isinstance(value, (list, tuple)):
        return ",".join(value), len(value) != 0
    if isinstance(value, Enum):
        text = str(value.value)
        return text, text != ""
    if isinstance(value, str):
        return value, value != ""
    # bool before int: flags are ints to isinstance
    if isinstance(value, bool):
        return int(value), value
    if isinstance(value, int):
        return value, value != 0
    raise EncodeError(f"unknown type {type(value).__name__}")
