"""Character reference tables, decoding and re-encoding."""

from .decoder import decode_entities, decode_named_entities
from .encoder import encode_special_chars
from .table import ENTITY_LOOKUP, NAMED_ENTITIES

__all__ = [
    "ENTITY_LOOKUP",
    "NAMED_ENTITIES",
    "decode_entities",
    "decode_named_entities",
    "encode_special_chars",
]
