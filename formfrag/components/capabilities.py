"""
Capabilities shared by formfrag elements.

Each capability owns its own state and renders only its own attributes or
values. Elements hold capabilities as attributes instead of inheriting from
them, so unrelated element families can reuse the same code:

- ``BaseAttributes``: ``id``/``class`` for every element.
- ``EditableFields``: name/value/placeholder/required for form inputs.
- ``NumericFormat``: decimal precision and number formatting for anything
  that displays a number.

The protocols describe what an element may rely on when it holds one of
them.
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP, localcontext
import logging
from typing import Optional, Protocol, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from ..config import load_render_config
from ..errors import ValidationError
from ..values import FieldValue, Number, to_decimal
from .base import Component

logger = logging.getLogger("formfrag.components")


class HasBaseAttributes(Protocol):
    @property
    def id(self) -> Optional[str]: ...

    @property
    def class_(self) -> Optional[str]: ...

    def render_base_attributes(self) -> str: ...


class HasEditableFields(Protocol):
    name: Optional[str]
    value: Optional[FieldValue]
    placeholder: Optional[str]
    required: bool

    def set_name(self, name: str) -> "HasEditableFields": ...

    def set_value(self, value: FieldValue) -> "HasEditableFields": ...

    def set_placeholder(self, placeholder: str) -> "HasEditableFields": ...

    def set_required(self, required: bool = True) -> "HasEditableFields": ...

    def render_editable_attributes(self) -> str: ...


class HasNumericFormat(Protocol):
    decimals: int

    def set_decimals(self, decimals: int) -> "HasNumericFormat": ...

    def format_number(self, number: Union[Number, str]) -> str: ...


@dataclass(frozen=True)
class BaseAttributes:
    """``id`` and ``class`` shared by all elements; fixed at construction."""

    id: Optional[str] = None
    class_: Optional[str] = None

    def render_base_attributes(self) -> str:
        """Return ' id="..." class="..."' with unset attributes left out."""
        return Component.attribute_suffix(id=self.id, class_=self.class_)


@dataclass
class EditableFields:
    """Form-field state for inputs.

    Setters do not validate; elements that need stricter values check them
    before delegating here.
    """

    name: Optional[str] = None
    value: Optional[FieldValue] = None
    placeholder: Optional[str] = None
    required: bool = False

    def set_name(self, name: str) -> "EditableFields":
        self.name = name
        return self

    def set_value(self, value: FieldValue) -> "EditableFields":
        self.value = value
        return self

    def set_placeholder(self, placeholder: str) -> "EditableFields":
        self.placeholder = placeholder
        return self

    def set_required(self, required: bool = True) -> "EditableFields":
        self.required = required
        return self

    def render_editable_attributes(self) -> str:
        """Render name, value, placeholder and a bare ``required``, in that order."""
        return Component.attribute_suffix(
            name=self.name,
            value=str(self.value) if self.value is not None else None,
            placeholder=self.placeholder,
            required=bool(self.required),
        )


def _default_decimals() -> int:
    return load_render_config().default_decimals


class NumericFormat(BaseModel):
    """Decimal precision plus locale-independent number formatting.

    Output always uses ``.`` as the decimal separator and a space between
    thousands groups, e.g. ``1234.5`` at two decimals is ``1 234.50``.
    Ties round away from zero.
    """

    model_config = ConfigDict(validate_assignment=True)

    decimals: int = Field(default_factory=_default_decimals, ge=0, strict=True)

    def set_decimals(self, decimals: int) -> "NumericFormat":
        try:
            self.decimals = decimals
        except PydanticValidationError as exc:
            logger.warning(
                "Rejected precision of type %s for numeric format",
                type(decimals).__name__,
            )
            raise ValidationError(
                f"decimals must be a non-negative integer, got: {decimals!r}"
            ) from exc
        return self

    def format_number(self, number: Union[Number, str]) -> str:
        value = to_decimal(number)
        step = Decimal(1).scaleb(-self.decimals)
        with localcontext() as ctx:
            # Large values would otherwise overflow the default 28 digits
            ctx.prec = max(ctx.prec, value.adjusted() + self.decimals + 2)
            rounded = value.quantize(step, rounding=ROUND_HALF_UP)
        if rounded.is_zero():
            rounded = abs(rounded)
        return format(rounded, f",.{self.decimals}f").replace(",", " ")


__all__ = [
    "HasBaseAttributes",
    "HasEditableFields",
    "HasNumericFormat",
    "BaseAttributes",
    "EditableFields",
    "NumericFormat",
]
