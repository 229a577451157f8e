"""Call-control verbs.

One class per XML element. Constructor arguments map onto camelCase
attributes; optional string attributes are left out when empty.
"""

from __future__ import annotations

from plivoclient.xml.base import PlivoElement


def _opt(value: str | None) -> str | None:
    """Drop empty optional strings so the attribute is omitted."""
    return value or None


class Response(PlivoElement):
    """Root of every call-control document."""

    nestables = frozenset({
        "Speak", "Play", "GetDigits", "Record", "Dial", "Message", "Redirect",
        "Wait", "Hangup", "PreAnswer", "Conference", "DTMF",
    })

    def __init__(self) -> None:
        super().__init__()


class PreAnswer(PlivoElement):
    """Actions executed before the call is answered (early media)."""

    nestables = frozenset({
        "Play", "Speak", "GetDigits", "Wait", "Redirect", "Message", "DTMF",
    })

    def __init__(self) -> None:
        super().__init__()


class Speak(PlivoElement):
    """Read ``body`` out with text-to-speech."""

    def __init__(
        self,
        body: str,
        language: str = "en-US",
        loop: int = 1,
        voice: str = "WOMAN",
    ) -> None:
        super().__init__(body, {
            "voice": voice,
            "language": language,
            "loop": loop,
        })


class Play(PlivoElement):
    """Play the audio file at URL ``body``."""

    def __init__(self, body: str, loop: int = 1) -> None:
        super().__init__(body, {"loop": loop})


class Wait(PlivoElement):
    def __init__(self, length: int | str | None = None, silence: bool = False) -> None:
        super().__init__(None, {
            "length": None if length in (None, "") else length,
            "silence": silence,
        })


class Redirect(PlivoElement):
    """Continue the call with the XML served at URL ``body``."""

    def __init__(self, body: str, method: str = "POST") -> None:
        super().__init__(body, {"method": _opt(method)})


class Hangup(PlivoElement):
    """End the call, optionally after ``schedule`` seconds."""

    def __init__(self, reason: str = "", schedule: int = 0) -> None:
        super().__init__(None, {
            "schedule": schedule or None,
            "reason": _opt(reason),
        })


class DTMF(PlivoElement):
    """Send the digits in ``body`` on the call."""

    def __init__(self, body: str) -> None:
        super().__init__(body)


class GetDigits(PlivoElement):
    """Collect keypad input and post it to ``action``.

    Nested Speak/Play/Wait elements are played while waiting for input.
    """

    nestables = frozenset({"Speak", "Play", "Wait"})

    def __init__(
        self,
        action: str,
        method: str = "POST",
        timeout: int = 5,
        digit_timeout: int = 2,
        finish_on_key: str = "#",
        num_digits: int = 99,
        retries: int = 1,
        invalid_digits_sound: str = "",
        valid_digits: str = "1234567890*#",
        play_beep: bool = False,
        redirect: bool = False,
    ) -> None:
        super().__init__(None, {
            "action": action,
            "method": method,
            "timeout": timeout,
            "digitTimeout": digit_timeout,
            "finishOnKey": finish_on_key,
            "numDigits": num_digits,
            "retries": retries,
            "invalidDigitsSound": _opt(invalid_digits_sound),
            "validDigits": valid_digits,
            "playBeep": play_beep,
            "redirect": redirect,
        })


class Record(PlivoElement):
    """Record the caller and post the recording URL to ``action``."""

    def __init__(
        self,
        action: str,
        method: str = "POST",
        timeout: int = 15,
        finish_on_key: str = "",
        max_length: int = 60,
        play_beep: bool = True,
        record_session: bool = False,
        start_on_dial_answer: bool = False,
        redirect: bool = True,
        file_format: str = "mp3",
        callback_url: str = "",
        callback_method: str = "",
        transcription_type: str = "auto",
        transcription_url: str = "",
        transcription_method: str = "GET",
    ) -> None:
        super().__init__(None, {
            "action": action,
            "method": method,
            "timeout": timeout,
            "finishOnKey": _opt(finish_on_key),
            "maxLength": max_length,
            "playBeep": play_beep,
            "recordSession": record_session,
            "startOnDialAnswer": start_on_dial_answer,
            "redirect": redirect,
            "fileFormat": file_format,
            "callbackUrl": _opt(callback_url),
            "callbackMethod": _opt(callback_method),
            "transcriptionType": transcription_type,
            "transcriptionUrl": _opt(transcription_url),
            "transcriptionMethod": transcription_method,
        })


class Dial(PlivoElement):
    """Bridge the call to the nested Number and User destinations."""

    nestables = frozenset({"Number", "User"})

    def __init__(
        self,
        action: str = "",
        method: str = "POST",
        hangup_on_star: bool = False,
        time_limit: int = 14400,
        timeout: int | None = None,
        caller_id: str = "",
        caller_name: str = "",
        confirm_sound: str = "",
        confirm_key: str = "",
        dial_music: str = "",
        callback_url: str = "",
        callback_method: str = "POST",
        redirect: bool = True,
        digits_match: str = "",
        sip_headers: str = "",
    ) -> None:
        super().__init__(None, {
            "action": _opt(action),
            "method": method,
            "hangupOnStar": hangup_on_star,
            "timeLimit": time_limit,
            "timeout": timeout,
            "callerId": _opt(caller_id),
            "callerName": _opt(caller_name),
            "confirmSound": _opt(confirm_sound),
            "confirmKey": _opt(confirm_key),
            "dialMusic": _opt(dial_music),
            "callbackUrl": _opt(callback_url),
            "callbackMethod": callback_method,
            "redirect": redirect,
            "digitsMatch": _opt(digits_match),
            "sipHeaders": _opt(sip_headers),
        })


class Number(PlivoElement):
    """A phone number to dial; only valid inside Dial."""

    def __init__(
        self,
        body: str,
        send_digits: str = "",
        send_digits_mode: str = "",
        send_on_preanswer: bool = False,
    ) -> None:
        super().__init__(body, {
            "sendDigits": _opt(send_digits),
            "sendDigitsMode": _opt(send_digits_mode),
            "sendOnPreAnswer": send_on_preanswer,
        })


class User(PlivoElement):
    """A SIP endpoint to dial; only valid inside Dial."""

    def __init__(
        self,
        body: str,
        send_digits: str = "",
        send_digits_mode: str = "",
        send_on_preanswer: bool = False,
        sip_headers: str = "",
    ) -> None:
        super().__init__(body, {
            "sendDigits": _opt(send_digits),
            "sendDigitsMode": _opt(send_digits_mode),
            "sipHeaders": _opt(sip_headers),
            "sendOnPreAnswer": send_on_preanswer,
        })


class Conference(PlivoElement):
    """Join the caller to the conference room named ``body``."""

    def __init__(
        self,
        body: str,
        send_digits: str = "",
        muted: bool = False,
        enter_sound: str = "",
        exit_sound: str = "",
        start_conference_on_enter: bool = True,
        end_conference_on_exit: bool = False,
        stay_alone: bool = True,
        wait_sound: str = "",
        max_members: int = 200,
        time_limit: int = 0,
        hangup_on_star: bool = False,
        action: str = "",
        method: str = "",
        callback_url: str = "",
        callback_method: str = "POST",
        digits_match: str = "",
        floor_event: bool = False,
        redirect: bool = True,
        record: bool = True,
        record_file_format: str = "mp3",
        transcription_type: str = "auto",
        transcription_url: str = "",
        transcription_method: str = "GET",
    ) -> None:
        super().__init__(body, {
            "sendDigits": _opt(send_digits),
            "enterSound": _opt(enter_sound),
            "exitSound": _opt(exit_sound),
            "waitSound": _opt(wait_sound),
            "action": _opt(action),
            "method": _opt(method),
            "callbackUrl": _opt(callback_url),
            "digitsMatch": _opt(digits_match),
            "transcriptionUrl": _opt(transcription_url),
            "muted": muted,
            "startConferenceOnEnter": start_conference_on_enter,
            "endConferenceOnExit": end_conference_on_exit,
            "stayAlone": stay_alone,
            "maxMembers": max_members,
            "timeLimit": time_limit,
            "hangupOnStar": hangup_on_star,
            "callbackMethod": callback_method,
            "floorEvent": floor_event,
            "redirect": redirect,
            "record": record,
            "recordFileFormat": record_file_format,
            "transcriptionType": transcription_type,
            "transcriptionMethod": transcription_method,
        })


class Message(PlivoElement):
    """Send an SMS with text ``body`` from ``src`` to ``dst``."""

    def __init__(
        self,
        body: str,
        src: str,
        dst: str,
        type: str = "sms",
        callback_url: str = "",
        callback_method: str = "POST",
    ) -> None:
        super().__init__(body, {
            "src": src,
            "dst": dst,
            "type": type,
            "callbackUrl": _opt(callback_url),
            "callbackMethod": callback_method,
        })
