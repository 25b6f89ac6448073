# formfrag
# Escaped HTML fragments for form fields, static values and links

from .errors import ValidationError
from .components import (
    Element,
    TextInput,
    NumberInput,
    StaticText,
    StaticNumber,
    Link,
)

__all__ = [
    "ValidationError",
    "Element",
    "TextInput",
    "NumberInput",
    "StaticText",
    "StaticNumber",
    "Link",
]
