"""JSON envelopes for ``--format json``."""

from __future__ import annotations

import json
from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel


def _now() -> str:
    return datetime.now(UTC).isoformat()


def format_json_response(
    *,
    data: BaseModel | dict[str, Any],
    command: str,
    message: str | None = None,
) -> str:
    """Return the success envelope for one evaluation or conversion.

    Result models are dumped without their unset (``None``) fields, so an
    invalid conversion carries no ``result`` or units::

        {
          "ok": true,
          "command": "temp",
          "data": {"selector": "X", "temperature": 100.0, "valid": false},
          "message": "That is not a valid input",
          "timestamp": "<ISO-8601 UTC>"
        }

    ``message`` is the console line for the same result and is omitted when
    not given.  Non-finite temperatures serialise as ``Infinity`` / ``NaN``.
    """
    payload = data.model_dump(exclude_none=True) if isinstance(data, BaseModel) else data
    envelope: dict[str, Any] = {"ok": True, "command": command, "data": payload}
    if message is not None:
        envelope["message"] = message
    envelope["timestamp"] = _now()
    return json.dumps(envelope, indent=2)


def format_json_error(*, code: str, message: str, command: str, **detail: Any) -> str:
    """Return the failure envelope.

    *detail* holds per-error context such as the rejected ``input`` text or
    the integer width (``bits``) that overflowed; it is merged into the
    ``error`` object next to ``code`` and ``message``.
    """
    envelope = {
        "ok": False,
        "command": command,
        "error": {"code": code, "message": message, **detail},
        "timestamp": _now(),
    }
    return json.dumps(envelope, indent=2)
