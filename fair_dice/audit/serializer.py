
"""
serializer.py
Provides utility functions for serializing and deserializing game events to/from JSON.
Used by the CLI to print the session transcript.
"""

import json
from typing import Any


def _default(o: Any):
    if isinstance(o, (bytes, bytearray)):
        return bytes(o).hex()
    return getattr(o, '__dict__', str(o))


def dumps(obj: Any, indent: int = None) -> str:
    """
    Serialize a Python object (including dataclasses) to a JSON string. Bytes become hex strings.
    Args:
        obj: Object to serialize.
        indent (int, optional): JSON indentation.
    Returns:
        str: JSON string.
    """
    return json.dumps(obj, default=_default, indent=indent)


def loads(s: str):
    """
    Deserialize a JSON string to a Python object (dict/list).
    Args:
        s (str): JSON string.
    Returns:
        object: Deserialized Python object.
    """
    return json.loads(s)
