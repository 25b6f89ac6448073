"""
Base helpers for formfrag components.

Every renderer in the package builds markup from plain Python strings and
passes user-supplied text through these helpers, so escaping is applied in
exactly one place.
"""

from typing import Any, Optional
import html


class Component:
    """Base class for everything that renders HTML.

    Provides the escaping and attribute helpers; subclasses implement
    ``render()``.
    """

    def render(self) -> str:
        """Render the component as an HTML string

        Returns:
            str: HTML representation of the component
        """
        raise NotImplementedError("Subclasses must implement render()")

    @staticmethod
    def escape(text: Optional[Any]) -> str:
        """Escape HTML entities to prevent XSS attacks

        Neutralises ``<``, ``>``, ``&``, ``"`` and ``'``.

        Args:
            text: Text to escape (can be None)

        Returns:
            str: Escaped text or empty string if None
        """
        return html.escape(str(text)) if text is not None else ""

    @staticmethod
    def attributes(**attrs: Any) -> str:
        """Build HTML attributes from keyword arguments

        Attributes keep the order they were passed in. ``None`` and ``False``
        drop the attribute, ``True`` renders it bare.

        Args:
            **attrs: Attribute key-value pairs

        Returns:
            str: HTML attribute string

        Example:
            >>> Component.attributes(id="test", data_value="123", required=True)
            'id="test" data-value="123" required'
        """
        result = []
        for key, value in attrs.items():
            # Trailing underscore for reserved names: class_ -> class
            if key.endswith("_"):
                key = key[:-1]
            else:
                # data_value -> data-value
                key = key.replace("_", "-")

            if value is True:
                result.append(key)
            elif value is not False and value is not None:
                result.append(f'{key}="{html.escape(str(value))}"')

        return " ".join(result)

    @classmethod
    def attribute_suffix(cls, **attrs: Any) -> str:
        """Like ``attributes()`` but with a leading space, or "" when empty.

        Lets callers append the result directly after a tag name.
        """
        rendered = cls.attributes(**attrs)
        return f" {rendered}" if rendered else ""
