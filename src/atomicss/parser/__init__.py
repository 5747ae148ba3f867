from atomicss.parser.errors import ValueParseError
from atomicss.parser.nodes import serialize
from atomicss.parser.transformer import parse_value

__all__ = ["parse_value", "serialize", "ValueParseError"]
