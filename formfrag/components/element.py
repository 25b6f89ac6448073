"""
Abstract element with ``id``/``class`` attributes.

Concrete elements combine their own markup with ``render_base_attributes()``
and, where they hold one, the output of their other capabilities.
"""

from typing import Optional

from .base import Component
from .capabilities import BaseAttributes, HasBaseAttributes


class Element(Component):
    """Base class for all renderable form fragments.

    Parameters:
        id: Optional ``id`` attribute.
        class_: Optional ``class`` attribute.

    Both are fixed at construction and escaped on output.
    """

    def __init__(self, id: Optional[str] = None, class_: Optional[str] = None) -> None:
        self.base: HasBaseAttributes = BaseAttributes(id, class_)

    @property
    def id(self) -> Optional[str]:
        return self.base.id

    @property
    def class_(self) -> Optional[str]:
        return self.base.class_

    def render_base_attributes(self) -> str:
        return self.base.render_base_attributes()
