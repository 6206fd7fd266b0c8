import json
from dataclasses import dataclass
from typing import Any, Dict

ALLOWED_FIELDS = ("id", "title", "done")

_decoder = json.JSONDecoder()


class TaskDecodeError(ValueError):
    """Request body does not decode into a task object."""


@dataclass(frozen=True)
class Task:
    id: int
    title: str
    done: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "title": self.title, "done": self.done}


def _check_type(key: str, value: Any) -> None:
    if key == "id":
        ok = isinstance(value, int) and not isinstance(value, bool)
        expected = "integer"
    elif key == "title":
        ok = isinstance(value, str)
        expected = "string"
    else:
        ok = isinstance(value, bool)
        expected = "boolean"

    if not ok:
        raise TaskDecodeError(
            f'cannot decode {type(value).__name__} into field "{key}" of type {expected}'
        )


def decode_task(raw: str) -> Task:
    """Decode a request body into an unsaved Task.

    Decoding is closed: unknown keys are rejected. JSON ``null`` leaves a
    field at its default, so the returned title may be empty; trimming and
    the required-title check are up to the caller. ``id`` is decoded but is
    not meaningful until the store assigns one. Only the first JSON value
    of the body is read; anything after it is ignored.
    """
    try:
        payload, _end = _decoder.raw_decode(raw.lstrip())
    except (ValueError, RecursionError) as exc:
        # ValueError covers JSONDecodeError and the int digit limit
        raise TaskDecodeError(f"invalid JSON: {exc}") from exc

    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        raise TaskDecodeError(
            f"cannot decode {type(payload).__name__} into task object"
        )

    for key in payload:
        if key not in ALLOWED_FIELDS:
            raise TaskDecodeError(f'unknown field "{key}"')

    fields: Dict[str, Any] = {"id": 0, "title": "", "done": False}
    for key, value in payload.items():
        if value is None:
            continue
        _check_type(key, value)
        fields[key] = value

    return Task(**fields)
