import json
from typing import Any, Optional


def validate_present(field_name: str, field_value: Any):
    if field_value is None:
        raise ValueError(f"Invalid value for {field_name}: cannot be missing")


def validate_not_blank(field_name: str, field_value: Optional[str]):
    validate_present(field_name, field_value)
    if field_value == "":
        raise ValueError(f"Invalid value for {field_name}: cannot be blank")


def normalize_key(value: Any) -> Optional[str]:
    """Converts a user key of any type to a string

    ``None`` stays ``None``. ``True`` becomes ``"1"`` and ``False`` an empty key,
    integral floats drop their fraction (``42.0`` becomes ``"42"``).
    """
    if value is None or isinstance(value, str):
        return value
    elif isinstance(value, bool):
        return "1" if value else ""
    elif isinstance(value, float):
        return f"{value:.0f}" if value.is_integer() else str(value)
    elif isinstance(value, int):
        return str(value)
    return json.dumps(value)
