import re
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from .errors import TaskDecodeError

_FIELDS = ("id", "description", "note", "applications")

# json.loads joins valid surrogate pairs, anything left over is unpaired
_LONE_SURROGATE = re.compile("[\ud800-\udfff]")


def _clean(value: str) -> str:
    return _LONE_SURROGATE.sub("\ufffd", value)


@dataclass(frozen=True)
class Task:
    id: str = ""
    description: str = ""
    note: str = ""
    applications: Tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "Task":
        """
        Build a Task from a decoded JSON value.

        Keys match field names case-insensitively, later keys win. Missing or
        null fields keep their empty value and unknown keys are ignored. A
        literal ``null`` body decodes to an empty Task. Unpaired surrogates in
        strings are replaced with U+FFFD.
        """
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise TaskDecodeError(
                f"cannot decode {type(data).__name__} into a task, expected an object"
            )

        values = {}
        for key, value in data.items():
            name = key.lower()
            if name not in _FIELDS or value is None:
                continue
            if name == "applications":
                values[name] = _decode_applications(value)
            elif isinstance(value, str):
                values[name] = _clean(value)
            else:
                raise TaskDecodeError(
                    f"field {key!r} must be a string, got {type(value).__name__}"
                )

        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        # key order matches the wire format
        return {
            "id": self.id,
            "description": self.description,
            "note": self.note,
            "applications": list(self.applications),
        }


def _decode_applications(value) -> Tuple[str, ...]:
    if not isinstance(value, list):
        raise TaskDecodeError(
            f"field 'applications' must be an array, got {type(value).__name__}"
        )
    for i, app in enumerate(value):
        if not isinstance(app, str):
            raise TaskDecodeError(
                f"applications[{i}] must be a string, got {type(app).__name__}"
            )
    return tuple(_clean(app) for app in value)
