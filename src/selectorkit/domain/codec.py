"""JSON text codec with positional object reconstruction.

``deserialize`` rebuilds an object by calling its constructor with the
decoded values *positionally*, in document order. Key names are ignored,
so a document only round-trips when its key order matches the
constructor's parameter order.
"""

from __future__ import annotations

import dataclasses
import json
from typing import Any


def _to_jsonable(value: Any) -> Any:
    """``json.dumps`` fallback for dataclasses and plain objects."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    if hasattr(value, "__dict__"):
        return dict(vars(value))
    msg = f"Object of type {type(value).__name__} is not JSON serializable"
    raise TypeError(msg)


def serialize(value: Any) -> str:
    """Serialize *value* as compact JSON text.

    Examples:
        >>> serialize([1, 2, 3])
        '[1,2,3]'
        >>> serialize({"width": 10, "height": 20})
        '{"width":10,"height":20}'
    """
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=_to_jsonable)


def deserialize(prototype: Any, text: str) -> Any:
    """Construct an instance of *prototype* from JSON *text*.

    *prototype* is a class, or an instance whose type is used.  A JSON
    object supplies its values in document order; a JSON array supplies
    its items.

    Raises:
        json.JSONDecodeError: If *text* is not valid JSON.
        TypeError: If the document is a scalar, or the values do not fit
            the constructor's positional parameters.
    """
    constructor = prototype if isinstance(prototype, type) else type(prototype)
    decoded = json.loads(text)
    if isinstance(decoded, dict):
        values = list(decoded.values())
    elif isinstance(decoded, list):
        values = decoded
    else:
        msg = f"Cannot reconstruct {constructor.__name__} from JSON {type(decoded).__name__}"
        raise TypeError(msg)
    return constructor(*values)
