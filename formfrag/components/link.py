"""
Hyperlink element.
"""

from typing import Optional

from .element import Element


class Link(Element):
    """Anchor with an escaped ``href`` and escaped link text.

    ``href`` is emitted as given (after escaping); it is not checked for
    being a well-formed URL.
    """

    def __init__(
        self,
        href: str,
        text: str,
        id: Optional[str] = None,
        class_: Optional[str] = None,
    ) -> None:
        super().__init__(id, class_)
        self.href = href
        self.text = text

    def render(self) -> str:
        href = self.attributes(href=self.href)
        return f"<a {href}{self.render_base_attributes()}>{self.escape(self.text)}</a>"
