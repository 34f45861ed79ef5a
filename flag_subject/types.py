from typing import Dict

from pydantic import JsonValue

# str, int, float, bool, None, or lists and string-keyed dicts of these
AttributeValue = JsonValue
Attributes = Dict[str, AttributeValue]
