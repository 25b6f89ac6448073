"""
Static (read-only) elements rendered as ``<span>``.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from ..errors import ValidationError
from ..values import Number, is_numeric
from .capabilities import HasNumericFormat, NumericFormat
from .element import Element

logger = logging.getLogger("formfrag.components")


class StaticText(Element):
    """Plain text wrapped in a span; the content is escaped on output."""

    def __init__(
        self,
        content: str,
        id: Optional[str] = None,
        class_: Optional[str] = None,
    ) -> None:
        super().__init__(id, class_)
        self.content = content

    def render(self) -> str:
        return f"<span{self.render_base_attributes()}>{self.escape(self.content)}</span>"


class StaticNumber(StaticText):
    """A number shown with fixed precision, e.g. ``1 234.50``.

    The number is stored as text like any other static content and parsed
    again when rendering. The formatted output only contains digits,
    spaces, ``.`` and ``-``, so it is emitted as is.
    """

    def __init__(
        self,
        number: Union[Number, str],
        id: Optional[str] = None,
        class_: Optional[str] = None,
    ) -> None:
        if not is_numeric(number):
            logger.warning(
                "Rejected non-numeric content of type %s for static number",
                type(number).__name__,
            )
            raise ValidationError(f"Static number must be numeric, got: {number!r}")
        text = number.strip() if isinstance(number, str) else str(number)
        super().__init__(text, id, class_)
        self.numeric: HasNumericFormat = NumericFormat()

    @property
    def decimals(self) -> int:
        return self.numeric.decimals

    def set_decimals(self, decimals: int) -> StaticNumber:
        self.numeric.set_decimals(decimals)
        return self

    def format_number(self, number: Union[Number, str]) -> str:
        return self.numeric.format_number(number)

    def render(self) -> str:
        formatted = self.format_number(self.content)
        return f"<span{self.render_base_attributes()}>{formatted}</span>"
