"""
Input elements.

``TextInput`` holds an ``EditableFields`` capability and renders a plain
``<input type="text">``. ``NumberInput`` extends it with a ``NumericFormat``
capability, accepts numeric values only and formats the value on output.
"""

from __future__ import annotations

from dataclasses import replace
import logging
from typing import Optional, Union

from ..errors import ValidationError
from ..values import FieldValue, Number, is_numeric
from .capabilities import EditableFields, HasEditableFields, HasNumericFormat, NumericFormat
from .element import Element

logger = logging.getLogger("formfrag.components")


class TextInput(Element):
    """Editable single-line text input.

    Example:
        >>> TextInput("input1", "form-control").set_name("full_name").set_required().render()
        '<input type="text" id="input1" class="form-control" name="full_name" required>'
    """

    input_type = "text"

    def __init__(self, id: Optional[str] = None, class_: Optional[str] = None) -> None:
        super().__init__(id, class_)
        self.editable: HasEditableFields = EditableFields()

    @property
    def value(self) -> Optional[FieldValue]:
        return self.editable.value

    def set_name(self, name: str) -> TextInput:
        self.editable.set_name(name)
        return self

    def set_value(self, value: FieldValue) -> TextInput:
        self.editable.set_value(value)
        return self

    def set_placeholder(self, placeholder: str) -> TextInput:
        self.editable.set_placeholder(placeholder)
        return self

    def set_required(self, required: bool = True) -> TextInput:
        self.editable.set_required(required)
        return self

    def render(self) -> str:
        return self._render_input(self.editable.render_editable_attributes())

    def _render_input(self, editable_attributes: str) -> str:
        return (
            f'<input type="{self.input_type}"'
            f"{self.render_base_attributes()}"
            f"{editable_attributes}>"
        )


class NumberInput(TextInput):
    """Numeric input whose value is shown with fixed precision.

    ``set_value`` rejects anything that is not a finite number or a numeric
    string. The stored value is never rewritten; formatting happens while
    rendering, so repeated renders always start from the original value.
    """

    input_type = "number"

    def __init__(self, id: Optional[str] = None, class_: Optional[str] = None) -> None:
        super().__init__(id, class_)
        self.numeric: HasNumericFormat = NumericFormat()

    @property
    def decimals(self) -> int:
        return self.numeric.decimals

    def set_value(self, value: FieldValue) -> NumberInput:
        if not is_numeric(value):
            logger.warning(
                "Rejected non-numeric value of type %s for number input %r",
                type(value).__name__,
                self.editable.name,
            )
            raise ValidationError(f"Value must be numeric, got: {value!r}")
        return super().set_value(value)

    def set_decimals(self, decimals: int) -> NumberInput:
        self.numeric.set_decimals(decimals)
        return self

    def format_number(self, number: Union[Number, str]) -> str:
        return self.numeric.format_number(number)

    def render(self) -> str:
        fields = self.editable
        if fields.value is not None:
            fields = replace(fields, value=self.format_number(fields.value))
        return self._render_input(fields.render_editable_attributes())
