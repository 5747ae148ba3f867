from atomicss.normalize.declarations import Declaration, normalize, normalize_value_text
from atomicss.normalize.properties import dashify, property_priority

__all__ = [
    "Declaration",
    "normalize",
    "normalize_value_text",
    "dashify",
    "property_priority",
]
