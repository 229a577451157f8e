"""Base element for the call-control XML builder.

Every verb is a :class:`PlivoElement` subclass named after the XML tag it
produces. A parent accepts a child only when the child's tag is listed in
the parent's ``nestables``; violations raise :class:`PlivoXMLError` as soon
as the child is added, never at serialization time.

Usage:
    response = Response()
    response.add_speak("Hello", voice="man")
    dial = response.add_dial(caller_id="14155550100")
    dial.add_number("14155550101")
    print(response.to_xml())
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, TypeVar
from xml.etree.ElementTree import Element, tostring

from plivoclient.exceptions import PlivoXMLError

if TYPE_CHECKING:
    from plivoclient.xml.elements import (
        DTMF,
        Conference,
        Dial,
        GetDigits,
        Hangup,
        Message,
        Number,
        Play,
        PreAnswer,
        Record,
        Redirect,
        Speak,
        User,
        Wait,
    )

XML_DECLARATION = '<?xml version="1.0" encoding="utf-8"?>'

# Attribute values normalized regardless of how the caller cased them
_LOWERCASE_VALUES = frozenset({"true", "false"})
_UPPERCASE_VALUES = frozenset({"get", "post", "man", "woman"})

E = TypeVar("E", bound="PlivoElement")


def convert_value(value: Any) -> str:
    """Render an attribute value the way the voice engine expects it.

    Booleans become ``true``/``false``, HTTP methods and voice genders are
    upper-cased, everything else is stringified unchanged.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    text = str(value)
    lowered = text.lower()
    if lowered in _LOWERCASE_VALUES:
        return lowered
    if lowered in _UPPERCASE_VALUES:
        return text.upper()
    return text


class PlivoElement:
    """A node of the call-control document.

    Args:
        body: Optional text content of the element.
        attributes: Attributes to set, in order. ``None`` values are skipped.
    """

    nestables: frozenset[str] = frozenset()

    def __init__(
        self,
        body: str | None = None,
        attributes: Mapping[str, Any] | None = None,
    ) -> None:
        self.element = Element(self.tag())
        if body is not None:
            self.element.text = str(body)
        if attributes:
            self.add_attributes(attributes)

    @classmethod
    def tag(cls) -> str:
        return cls.__name__

    @property
    def name(self) -> str:
        return self.tag()

    @property
    def attributes(self) -> dict[str, str]:
        return dict(self.element.attrib)

    @property
    def children(self) -> list[str]:
        """Tags of the direct children, in insertion order."""
        return [child.tag for child in self.element]

    def add_attributes(self, attributes: Mapping[str, Any]) -> None:
        for key, value in attributes.items():
            if value is None:
                continue
            self.element.set(key, convert_value(value))

    def add(self, element: E) -> E:
        """Attach ``element`` as the last child and return it.

        Raises:
            PlivoXMLError: If ``element`` may not be nested within this element.
        """
        if element.name not in self.nestables:
            raise PlivoXMLError(
                f"Element {element.name} cannot be nested within {self.name}"
            )
        self.element.append(element.element)
        return element

    def _add_new(self, tag: str, *args: Any, **kwargs: Any) -> Any:
        from plivoclient.xml.registry import element_registry

        return self.add(element_registry.create(tag, *args, **kwargs))

    # ------------------------------------------------------------------
    # Verb helpers: build the element and attach it in one step
    # ------------------------------------------------------------------

    def add_speak(self, body: str, **kwargs: Any) -> Speak:
        return self._add_new("Speak", body, **kwargs)

    def add_play(self, body: str, **kwargs: Any) -> Play:
        return self._add_new("Play", body, **kwargs)

    def add_get_digits(self, action: str, **kwargs: Any) -> GetDigits:
        return self._add_new("GetDigits", action, **kwargs)

    def add_record(self, action: str, **kwargs: Any) -> Record:
        return self._add_new("Record", action, **kwargs)

    def add_dial(self, **kwargs: Any) -> Dial:
        return self._add_new("Dial", **kwargs)

    def add_number(self, body: str, **kwargs: Any) -> Number:
        return self._add_new("Number", body, **kwargs)

    def add_user(self, body: str, **kwargs: Any) -> User:
        return self._add_new("User", body, **kwargs)

    def add_redirect(self, body: str, **kwargs: Any) -> Redirect:
        return self._add_new("Redirect", body, **kwargs)

    def add_wait(self, length: int | str | None = None, **kwargs: Any) -> Wait:
        return self._add_new("Wait", length, **kwargs)

    def add_hangup(self, **kwargs: Any) -> Hangup:
        return self._add_new("Hangup", **kwargs)

    def add_pre_answer(self) -> PreAnswer:
        return self._add_new("PreAnswer")

    def add_conference(self, body: str, **kwargs: Any) -> Conference:
        return self._add_new("Conference", body, **kwargs)

    def add_message(self, body: str, src: str, dst: str, **kwargs: Any) -> Message:
        return self._add_new("Message", body, src, dst, **kwargs)

    def add_dtmf(self, body: str) -> DTMF:
        return self._add_new("DTMF", body)

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_xml(self) -> str:
        """Render the tree rooted at this element as an XML document."""
        return XML_DECLARATION + tostring(self.element, encoding="unicode")

    def to_bytes(self) -> bytes:
        return self.to_xml().encode("utf-8")

    def __str__(self) -> str:
        return self.to_xml()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} attributes={self.attributes} children={self.children}>"
