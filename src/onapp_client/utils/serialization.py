"""JSON serialization utilities."""

from __future__ import annotations

import base64
import datetime
import decimal
import json

from pydantic import BaseModel


def json_default(obj: object) -> object:
    """JSON serializer for objects not serializable by default json code."""
    if isinstance(obj, BaseModel):
        return obj.model_dump(exclude_none=True)
    if isinstance(obj, (datetime.date, datetime.datetime)):
        return obj.isoformat()
    if isinstance(obj, decimal.Decimal):
        # Integral values stay ints; values a float can't hold exactly go out as strings.
        if obj == obj.to_integral_value():
            return int(obj)
        f = float(obj)
        if decimal.Decimal(str(f)) != obj:
            return str(obj)
        return f
    if isinstance(obj, bytes):
        try:
            return obj.decode("utf-8")
        except UnicodeDecodeError:
            return base64.b64encode(obj).decode("utf-8")
    if isinstance(obj, (set, frozenset, tuple)):
        return list(obj)

    return str(obj)


def dumps(payload: object) -> str:
    return json.dumps(payload, ensure_ascii=True, default=json_default)
