"""Builder for the call-control XML document."""

from plivoclient.xml.base import XML_DECLARATION, PlivoElement, convert_value
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
    Response,
    Speak,
    User,
    Wait,
)
from plivoclient.xml.registry import ElementRegistry, element_registry

__all__ = [
    "PlivoElement",
    "convert_value",
    "XML_DECLARATION",
    "ElementRegistry",
    "element_registry",
    "Response",
    "Speak",
    "Play",
    "GetDigits",
    "Record",
    "Dial",
    "Number",
    "User",
    "Conference",
    "Message",
    "Redirect",
    "Wait",
    "Hangup",
    "PreAnswer",
    "DTMF",
]
