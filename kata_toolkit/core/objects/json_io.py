from __future__ import annotations

import dataclasses
import json
from typing import Any, TypeVar

from kata_toolkit.core.errors import KataLoadError, KataValidationError


T = TypeVar("T")


def get_json(obj: Any) -> str:
    """Return the compact JSON representation of ``obj``.

    Dataclass instances are serialized field by field, in declaration order.
    """
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        obj = dataclasses.asdict(obj)
    return json.dumps(obj, separators=(",", ":"))


def from_json(cls: type[T], text: str) -> T:
    """Parse ``text`` into an instance of the dataclass ``cls``.

    The JSON object must carry exactly the init fields of ``cls``.
    """
    if not dataclasses.is_dataclass(cls):
        raise TypeError(f"{cls!r} is not a dataclass")

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise KataLoadError(code="E_JSON_PARSE", message=str(e)) from e

    if not isinstance(data, dict):
        raise KataLoadError(
            code="E_INVALID_TOP_LEVEL",
            message="top-level document must be an object",
        )

    fields = [f for f in dataclasses.fields(cls) if f.init]
    known = {f.name for f in fields}
    required = {
        f.name
        for f in fields
        if f.default is dataclasses.MISSING and f.default_factory is dataclasses.MISSING
    }

    unknown = sorted(set(data) - known)
    if unknown:
        raise KataValidationError(
            code="E_UNKNOWN_FIELD",
            message=f"unknown field(s) for {cls.__name__}: {', '.join(unknown)}",
            path=unknown[0],
        )
    missing = sorted(required - set(data))
    if missing:
        raise KataValidationError(
            code="E_REQUIRED_FIELD",
            message=f"missing field(s) for {cls.__name__}: {', '.join(missing)}",
            path=missing[0],
        )
    return cls(**data)
