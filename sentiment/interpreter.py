"""
Response Interpreter - Classify a remote body into canonical content.

The content variant is chosen from the hook's mode alone, never by
inspecting the body:

    key absent               -> PlainText(body)
    key present, time off    -> KeyedText(body[key])
    key present, time on     -> KeyedTimeBuckets(body[key])

Malformed JSON raises DecodeError. Well-formed JSON that does not match
the declared shape raises ShapeError.
"""

import json
import logging
import math
from typing import Any

from .exceptions import DecodeError, ShapeError
from .models import (
    Content,
    Hook,
    HookMode,
    KeyedText,
    KeyedTimeBuckets,
    PlainText,
    TimeBucket,
)


logger = logging.getLogger(__name__)


def interpret(hook: Hook, body: str) -> Content:
    """Parse ``body`` according to ``hook.mode``."""
    mode = hook.mode
    if mode is HookMode.PLAIN_TEXT:
        return PlainText(body)

    value = _extract_key(hook, body)

    if mode is HookMode.KEYED_TEXT:
        if not isinstance(value, str):
            raise ShapeError(
                f"Value at key '{hook.key}' must be a string, got {_type_name(value)}",
                hook_id=hook.hook_id,
                field=hook.key,
            )
        return KeyedText(value)

    return KeyedTimeBuckets(_parse_buckets(hook, value))


def _extract_key(hook: Hook, body: str) -> Any:
    try:
        data = json.loads(body)
    except json.JSONDecodeError as e:
        raise DecodeError(
            f"Remote body is not valid JSON (line {e.lineno}, column {e.colno})",
            hook_id=hook.hook_id,
            raw_data=body,
        )

    if not isinstance(data, dict):
        raise ShapeError(
            f"Remote JSON must be an object, got {_type_name(data)}",
            hook_id=hook.hook_id,
        )
    if hook.key not in data:
        raise ShapeError(
            f"Remote JSON is missing key '{hook.key}'",
            hook_id=hook.hook_id,
            field=hook.key,
        )
    return data[hook.key]


def _parse_buckets(hook: Hook, value: Any) -> list[TimeBucket]:
    if not isinstance(value, list):
        raise ShapeError(
            f"Value at key '{hook.key}' must be a list of time buckets, got {_type_name(value)}",
            hook_id=hook.hook_id,
            field=hook.key,
        )

    buckets = []
    for index, item in enumerate(value):
        if not isinstance(item, dict):
            raise ShapeError(
                f"Time bucket {index} must be an object, got {_type_name(item)}",
                hook_id=hook.hook_id,
                field=f"{hook.key}[{index}]",
            )

        start = _number_field(hook, item, "start", index)
        end = _number_field(hook, item, "end", index)

        text = item.get("text")
        if not isinstance(text, str):
            raise ShapeError(
                f"Time bucket {index} field 'text' must be a string, got {_type_name(text)}",
                hook_id=hook.hook_id,
                field=f"{hook.key}[{index}].text",
            )

        if not start < end:
            raise ShapeError(
                f"Time bucket {index} must start before it ends ({start} >= {end})",
                hook_id=hook.hook_id,
                field=f"{hook.key}[{index}]",
            )

        buckets.append(TimeBucket(start=start, end=end, text=text))

    logger.debug(f"[{hook.hook_id}] Interpreted {len(buckets)} time buckets")
    return buckets


def _number_field(hook: Hook, item: dict[str, Any], name: str, index: int) -> float:
    value = item.get(name)
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ShapeError(
            f"Time bucket {index} field '{name}' must be a number, got {_type_name(value)}",
            hook_id=hook.hook_id,
            field=f"{hook.key}[{index}].{name}",
        )
    # 1e400 and Infinity parse to inf, NaN literals to nan
    if not math.isfinite(value):
        raise ShapeError(
            f"Time bucket {index} field '{name}' must be a finite number, got {value}",
            hook_id=hook.hook_id,
            field=f"{hook.key}[{index}].{name}",
        )
    return float(value)


def _type_name(value: Any) -> str:
    if value is None:
        return "null"
    return type(value).__name__
