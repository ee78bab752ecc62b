import json
from typing import Any, Union


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def loads_strict(data: Union[str, bytes]) -> Any:
    """``json.loads`` without the NaN, Infinity and -Infinity extensions."""
    return json.loads(data, parse_constant=_reject_constant)
