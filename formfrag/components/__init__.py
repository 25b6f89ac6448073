# formfrag component system
# Pure Python elements for escaped HTML fragments

from .base import Component
from .capabilities import (
    BaseAttributes,
    EditableFields,
    NumericFormat,
    HasBaseAttributes,
    HasEditableFields,
    HasNumericFormat,
)
from .element import Element
from .inputs import TextInput, NumberInput
from .static import StaticText, StaticNumber
from .link import Link

__all__ = [
    "Component",
    "BaseAttributes",
    "EditableFields",
    "NumericFormat",
    "HasBaseAttributes",
    "HasEditableFields",
    "HasNumericFormat",
    "Element",
    "TextInput",
    "NumberInput",
    "StaticText",
    "StaticNumber",
    "Link",
]
