"""Encoding of declaration field ids into index path segments.

Field ids such as ``child.name`` contain dots, which the search engine
reads as object nesting. They are stored under an encoded segment
instead.
"""

SEPARATOR = "____"


def encode_field_id(field_id: str) -> str:
    """Encode a field id into a single path segment."""
    return field_id.replace(".", SEPARATOR)


def decode_field_id(segment: str) -> str:
    """Decode a path segment back into its field id."""
    return segment.replace(SEPARATOR, ".")
