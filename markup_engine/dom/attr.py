"""
Attr implementation for the parsed tree.
"""

from typing import Any, Dict, Union

# A valueless attribute such as ``disabled`` carries this instead of a string
BOOLEAN_TRUE = True

AttrValue = Union[str, bool]


class Attr:
    """
    One ``name[=value]`` pair of an element.

    Names are kept exactly as written (no case folding). Values are never
    entity-decoded.
    """

    def __init__(self, name: str, value: AttrValue = BOOLEAN_TRUE):
        """
        Initialize a new attribute.

        Args:
            name: The attribute name, non-empty
            value: The attribute value, or True for a valueless attribute

        Raises:
            ValueError: If the name is empty or the value is neither a string nor True
        """
        if not name:
            raise ValueError("Attribute name must not be empty")
        if value is not BOOLEAN_TRUE and not isinstance(value, str):
            raise ValueError(f"Attribute value must be a string or True, got {value!r}")
        self._name = name
        self._value = value

    @property
    def name(self) -> str:
        return self._name

    @property
    def value(self) -> AttrValue:
        return self._value

    @property
    def is_boolean(self) -> bool:
        """True for an attribute written without ``=value``."""
        return self._value is BOOLEAN_TRUE

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self._name, "value": self._value}

    def __eq__(self, other) -> bool:
        if not isinstance(other, Attr):
            return NotImplemented
        # ``True == "True"`` is already False, but ``True == 1`` is not
        return (self._name == other._name
                and type(self._value) is type(other._value)
                and self._value == other._value)

    def __hash__(self) -> int:
        return hash((self._name, self._value))

    def __repr__(self) -> str:
        return f"Attr({self._name!r}, {self._value!r})"
