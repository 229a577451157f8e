"""plivoclient - Python SDK for the Plivo cloud telephony platform.

Two parts: a REST client for the account API, and a builder for the
call-control XML the voice engine executes.

Quick start (REST):
    from plivoclient import RestAPI

    api = RestAPI("MAXXXXXXXXXXXXXXXXXXXX", "your_auth_token")
    account = api.get_account()
    if not account.ok:
        print(account.error)

Quick start (XML):
    from plivoclient import Response

    response = Response()
    response.add_speak("Hello", voice="man")
    dial = response.add_dial()
    dial.add_number("14155550101")
    print(response.to_xml())
"""

__version__ = "0.3.0"

# Core
from plivoclient.config import ClientConfig, DEFAULT_CONFIG_YAML, load_config
from plivoclient.exceptions import MissingParameterError, PlivoError, PlivoXMLError

# REST
from plivoclient.rest.client import INVALID_JSON, RestAPI
from plivoclient.rest.models import PlivoResponse

# XML
from plivoclient.xml.base import PlivoElement
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
from plivoclient.xml.registry import element_registry

__all__ = [
    # Core
    "ClientConfig",
    "DEFAULT_CONFIG_YAML",
    "load_config",
    "PlivoError",
    "MissingParameterError",
    "PlivoXMLError",
    # REST
    "RestAPI",
    "PlivoResponse",
    "INVALID_JSON",
    # XML
    "PlivoElement",
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
