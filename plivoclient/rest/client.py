"""REST client for the Plivo HTTP API.

Every public method maps a parameter mapping onto one HTTP request against
the account's base URL and returns a typed response record. Remote failures
are reported on the record's ``error`` field; only a missing mandatory
parameter raises, and it does so before anything is sent.

Usage:
    api = RestAPI("MAXXXXXXXXXXXXXXXXXXXX", "tokenvalue")
    account = api.get_account()
    if account.ok:
        print(account.cash_credits)

    api.make_call({"from": "14155550100", "to": "14155550101",
                   "answer_url": "https://example.com/answer"})
"""

from __future__ import annotations

import warnings
from typing import Any, Mapping, Optional, Type, TypeVar
from urllib.parse import quote

import httpx
from loguru import logger
from pydantic import ValidationError

from plivoclient.config import (
    DEFAULT_API_VERSION,
    DEFAULT_BASE_URL,
    DEFAULT_USER_AGENT,
    ClientConfig,
)
from plivoclient.exceptions import MissingParameterError
from plivoclient.rest.models import (
    CDR,
    Account,
    Application,
    ApplicationList,
    BulkCall,
    Call,
    CDRList,
    Conference,
    CreateApplication,
    CreateEndpoint,
    CreateSubAccount,
    Endpoint,
    EndpointList,
    GenericResponse,
    IncomingCarrier,
    IncomingCarrierList,
    LiveCall,
    LiveCallList,
    LiveConferenceList,
    Message,
    MessageList,
    MessageResponse,
    Number,
    NumberList,
    NumberResponse,
    OutgoingCarrier,
    OutgoingCarrierList,
    OutgoingCarrierRouting,
    OutgoingCarrierRoutingList,
    PlivoResponse,
    Pricing,
    Record,
    SubAccount,
    SubAccountList,
)

T = TypeVar("T", bound=PlivoResponse)
Params = Optional[Mapping[str, Any]]

# Error text reported when a response body cannot be decoded as JSON. Several
# delete-style endpoints answer with an empty body on success, so for those
# this message is treated as success (see ``empty_ok`` in RestAPI._request).
INVALID_JSON = "Invalid JSON string"

_METHODS = ("GET", "POST", "DELETE")


def _merge(params: Params, extra: Mapping[str, Any]) -> dict[str, Any]:
    """Combine a params mapping with keyword arguments, dropping absent values."""
    data = dict(params or {})
    data.update(extra)
    return {key: value for key, value in data.items() if value is not None}


def _pop_key(data: dict[str, Any], key: str) -> str:
    """Remove a mandatory path parameter from ``data`` and return it URL-quoted."""
    value = data.pop(key, None)
    if value is None or value == "":
        raise MissingParameterError(key)
    return quote(str(value), safe="")


def _query_value(value: Any) -> Any:
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


class RestAPI:
    """Client for the account-scoped REST API.

    Args:
        auth_id: Account auth ID, also the account segment of every URL.
        auth_token: Account auth token used for HTTP Basic auth.
        version: API version segment (default: "v1").
        base_url: Scheme and host of the API.
        timeout: Request timeout in seconds.
        user_agent: Value of the User-Agent header.
        transport: Optional httpx transport, e.g. ``httpx.MockTransport``.
    """

    def __init__(
        self,
        auth_id: str,
        auth_token: str,
        version: str = DEFAULT_API_VERSION,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        if not auth_id:
            raise MissingParameterError("auth_id")
        if not auth_token:
            raise MissingParameterError("auth_token")

        self.auth_id = auth_id
        self.auth_token = auth_token
        self.version = version
        self.base_url = f"{base_url.rstrip('/')}/{version}/Account/{auth_id}"
        self._client = httpx.Client(
            auth=(auth_id, auth_token),
            headers={"User-Agent": user_agent},
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def from_config(cls, config: ClientConfig, **kwargs: Any) -> RestAPI:
        """Build a client from a :class:`ClientConfig`."""
        return cls(
            config.auth_id,
            config.auth_token,
            config.version,
            base_url=config.base_url,
            timeout=config.timeout,
            user_agent=config.user_agent,
            **kwargs,
        )

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()

    def __enter__(self) -> RestAPI:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    def _request(
        self,
        method: str,
        path: str,
        data: Mapping[str, Any],
        model: Type[T],
        *,
        empty_ok: bool = False,
    ) -> T:
        """Send one request and deserialize the response into ``model``.

        GET and DELETE send ``data`` as query fields, POST sends it as a
        single JSON body. Unknown methods fall back to GET.

        Args:
            method: HTTP method name.
            path: Resource path relative to the account URL.
            data: Request parameters; None values must already be dropped.
            model: Response record type.
            empty_ok: Treat an undecodable body on a 2xx response as success.
                Used by delete-style endpoints that answer with no content.

        Returns:
            A ``model`` instance; ``error`` is set when the call failed.
        """
        method = method.upper()
        if method not in _METHODS:
            method = "GET"
        url = f"{self.base_url}{path}"
        logger.debug(f"Plivo API: {method} {url}")

        try:
            if method == "POST":
                response = self._client.post(url, json=dict(data))
            else:
                params = {key: _query_value(value) for key, value in data.items()}
                response = self._client.request(method, url, params=params)
        except httpx.HTTPError as e:
            logger.warning(f"Plivo API: {method} {path} failed: {e}")
            return model(error=str(e) or type(e).__name__)

        status = response.status_code
        try:
            body = response.json()
        except ValueError:
            body = None

        # empty, undecodable, null or array bodies all land here
        if not isinstance(body, dict):
            if response.is_success:
                if empty_ok:
                    return model(status_code=status)
                error = INVALID_JSON
            else:
                error = f"HTTP {status} {response.reason_phrase}".strip()
            logger.warning(f"Plivo API: {method} {path} returned no JSON object ({status})")
            return model(error=error, status_code=status)

        try:
            record = model.model_validate(body)
        except ValidationError as e:
            logger.warning(f"Plivo API: {method} {path} response did not match {model.__name__}: {e}")
            api_id = body.get("api_id")
            return model(
                api_id=api_id if isinstance(api_id, str) else None,
                error=str(e),
                status_code=status,
            )

        record.status_code = status
        if not response.is_success and not record.error:
            record.error = f"HTTP {status} {response.reason_phrase}".strip()
        return record

    # ------------------------------------------------------------------
    # Accounts
    # ------------------------------------------------------------------

    def get_account(self, params: Params = None, **kwargs: Any) -> Account:
        """Fetch details of the authenticated account."""
        return self._request("GET", "/", _merge(params, kwargs), Account)

    def modify_account(self, params: Params = None, **kwargs: Any) -> GenericResponse:
        return self._request("POST", "/", _merge(params, kwargs), GenericResponse)

    def get_subaccounts(self, params: Params = None, **kwargs: Any) -> SubAccountList:
        return self._request("GET", "/Subaccount/", _merge(params, kwargs), SubAccountList)

    def get_subaccount(self, params: Params = None, **kwargs: Any) -> SubAccount:
        data = _merge(params, kwargs)
        subauth_id = _pop_key(data, "subauth_id")
        return self._request("GET", f"/Subaccount/{subauth_id}/", data, SubAccount)

    def create_subaccount(self, params: Params = None, **kwargs: Any) -> CreateSubAccount:
        return self._request("POST", "/Subaccount/", _merge(params, kwargs), CreateSubAccount)

    def modify_subaccount(self, params: Params = None, **kwargs: Any) -> GenericResponse:
        data = _merge(params, kwargs)
        subauth_id = _pop_key(data, "subauth_id")
        return self._request("POST", f"/Subaccount/{subauth_id}/", data, GenericResponse)

    def delete_subaccount(self, params: Params = None, **kwargs: Any) -> GenericResponse:
        data = _merge(params, kwargs)
        subauth_id = _pop_key(data, "subauth_id")
        return self._request(
            "DELETE", f"/Subaccount/{subauth_id}/", data, GenericResponse, empty_ok=True
        )

    # ------------------------------------------------------------------
    # Applications
    # ------------------------------------------------------------------

    def get_applications(self, params: Params = None, **kwargs: Any) -> ApplicationList:
        return self._request("GET", "/Application/", _merge(params, kwargs), ApplicationList)

    def get_application(self, params: Params = None, **kwargs: Any) -> Application:
        data = _merge(params, kwargs)
        app_id = _pop_key(data, "app_id")
        return self._request("GET", f"/Application/{app_id}/", data, Application)

    def create_application(self, params: Params = None, **kwargs: Any) -> CreateApplication:
        return self._request("POST", "/Application/", _merge(params, kwargs), CreateApplication)

    def modify_application(self, params: Params = None, **kwargs: Any) -> GenericResponse:
        data = _merge(params, kwargs)
        app_id = _pop_key(data, "app_id")
        return self._request("POST", f"/Application/{app_id}/", data, GenericResponse)

    def delete_application(self, params: Params = None, **kwargs: Any) -> GenericResponse:
        data = _merge(params, kwargs)
        app_id = _pop_key(data, "app_id")
        return self._request(
            "DELETE", f"/Application/{app_id}/", data, GenericResponse, empty_ok=True
        )

    # ------------------------------------------------------------------
    # Numbers
    # ------------------------------------------------------------------

    def get_numbers(self, params: Params = None, **kwargs: Any) -> NumberList:
        """List numbers rented by the account."""
        return self._request("GET", "/Number/", _merge(params, kwargs), NumberList)

    def search_numbers(self, params: Params = None, **kwargs: Any) -> NumberList:
        """Search individual available numbers.

        Deprecated in favour of :meth:`search_number_group`.
        """
        warnings.warn(
            "search_numbers() is deprecated, use search_number_group() instead",
            DeprecationWarning,
            stacklevel=2,
        )
        return self._request("GET", "/AvailableNumber/", _merge(params, kwargs), NumberList)

    def search_number_group(self, params: Params = None, **kwargs: Any) -> NumberList:
        return self._request("GET", "/AvailableNumberGroup/", _merge(params, kwargs), NumberList)

    def get_number(self, params: Params = None, **kwargs: Any) -> Number:
        data = _merge(params, kwargs)
        number = _pop_key(data, "number")
        return self._request("GET", f"/Number/{number}/", data, Number)

    def rent_from_number_group(self, params: Params = None, **kwargs: Any) -> NumberResponse:
        data = _merge(params, kwargs)
        group_id = _pop_key(data, "group_id")
        return self._request("POST", f"/AvailableNumberGroup/{group_id}/", data, NumberResponse)

    def unrent_number(self, params: Params = None, **kwargs: Any) -> GenericResponse:
        data = _merge(params, kwargs)
        number = _pop_key(data, "number")
        return self._request("DELETE", f"/Number/{number}/", data, GenericResponse, empty_ok=True)

    def link_application_number(self, params: Params = None, **kwargs: Any) -> GenericResponse:
        """Attach an application (``app_id``) to a rented number."""
        data = _merge(params, kwargs)
        number = _pop_key(data, "number")
        return self._request("POST", f"/Number/{number}/", data, GenericResponse)

    def unlink_application_number(self, params: Params = None, **kwargs: Any) -> GenericResponse:
        """Detach whatever application is attached to a rented number."""
        data = _merge(params, kwargs)
        number = _pop_key(data, "number")
        # an explicit empty app_id is how the API unlinks
        data["app_id"] = ""
        return self._request("POST", f"/Number/{number}/", data, GenericResponse)

    # ------------------------------------------------------------------
    # Calls
    # ------------------------------------------------------------------

    def get_cdrs(self, params: Params = None, **kwargs: Any) -> CDRList:
        """List call detail records of completed calls."""
        return self._request("GET", "/Call/", _merge(params, kwargs), CDRList)

    def get_cdr(self, params: Params = None, **kwargs: Any) -> CDR:
        data = _merge(params, kwargs)
        record_id = _pop_key(data, "record_id")
        return self._request("GET", f"/Call/{record_id}/", data, CDR)

    def get_live_calls(self) -> LiveCallList:
        return self._request("GET", "/Call/", {"status": "live"}, LiveCallList)

    def get_live_call(self, params: Params = None, **kwargs: Any) -> LiveCall:
        data = _merge(params, kwargs)
        call_uuid = _pop_key(data, "call_uuid")
        data["status"] = "live"
        return self._request("GET", f"/Call/{call_uuid}/", data, LiveCall)

    def make_call(self, params: Params = None, **kwargs: Any) -> Call:
        """Place an outbound call.

        Typical parameters are ``from``, ``to`` and ``answer_url``. Since
        ``from`` is a Python keyword, pass it through the ``params`` mapping.
        """
        return self._request("POST", "/Call/", _merge(params, kwargs), Call)

    def make_bulk_call(
        self,
        params: Params = None,
        destinations: Mapping[str, str] | None = None,
        **kwargs: Any,
    ) -> BulkCall:
        """Place one call to several destinations at once.

        Args:
            params: Call parameters as for :meth:`make_call`, without ``to``.
            destinations: Destination number -> SIP header string. Both
                sides are joined with ``<`` into ``to`` and ``sip_headers``.
        """
        if not destinations:
            raise MissingParameterError("to")
        data = _merge(params, kwargs)
        data["to"] = "<".join(destinations.keys())
        data["sip_headers"] = "<".join(destinations.values())
        return self._request("POST", "/Call/", data, BulkCall)

    def hangup_all_calls(self) -> GenericResponse:
        return self._request("DELETE", "/Call/", {}, GenericResponse, empty_ok=True)

    def hangup_call(self, params: Params = None, **kwargs: Any) -> GenericResponse:
        data = _merge(params, kwargs)
        call_uuid = _pop_key(data, "call_uuid")
        return self._request("DELETE", f"/Call/{call_uuid}/", data, GenericResponse, empty_ok=True)

    def transfer_call(self, params: Params = None, **kwargs: Any) -> GenericResponse:
        data = _merge(params, kwargs)
        call_uuid = _pop_key(data, "call_uuid")
        return self._request("POST", f"/Call/{call_uuid}/", data, GenericResponse)

    def record(self, params: Params = None, **kwargs: Any) -> Record:
        """Start recording a live call."""
        data = _merge(params, kwargs)
        call_uuid = _pop_key(data, "call_uuid")
        return self._request("POST", f"/Call/{call_uuid}/Record/", data, Record)

    def stop_record(self, params: Params = None, **kwargs: Any) -> GenericResponse:
        data = _merge(params, kwargs)
        call_uuid = _pop_key(data, "call_uuid")
        return self._request(
            "DELETE", f"/Call/{call_uuid}/Record/", data, GenericResponse, empty_ok=True
        )

    def play(self, params: Params = None, **kwargs: Any) -> GenericResponse:
        data = _merge(params, kwargs)
        call_uuid = _pop_key(data, "call_uuid")
        return self._request("POST", f"/Call/{call_uuid}/Play/", data, GenericResponse)

    def stop_play(self, params: Params = None, **kwargs: Any) -> GenericResponse:
        data = _merge(params, kwargs)
        call_uuid = _pop_key(data, "call_uuid")
        return self._request(
            "DELETE", f"/Call/{call_uuid}/Play/", data, GenericResponse, empty_ok=True
        )

    def speak(self, params: Params = None, **kwargs: Any) -> GenericResponse:
        data = _merge(params, kwargs)
        call_uuid = _pop_key(data, "call_uuid")
        return self._request("POST", f"/Call/{call_uuid}/Speak/", data, GenericResponse)

    def send_digits(self, params: Params = None, **kwargs: Any) -> GenericResponse:
        data = _merge(params, kwargs)
        call_uuid = _pop_key(data, "call_uuid")
        return self._request("POST", f"/Call/{call_uuid}/DTMF/", data, GenericResponse)

    # ------------------------------------------------------------------
    # Conferences
    # ------------------------------------------------------------------

    def get_live_conferences(self) -> LiveConferenceList:
        return self._request("GET", "/Conference/", {}, LiveConferenceList)

    def hangup_all_conferences(self) -> GenericResponse:
        return self._request("DELETE", "/Conference/", {}, GenericResponse, empty_ok=True)

    def get_live_conference(self, params: Params = None, **kwargs: Any) -> Conference:
        data = _merge(params, kwargs)
        name = _pop_key(data, "conference_name")
        return self._request("GET", f"/Conference/{name}/", data, Conference)

    def hangup_conference(self, params: Params = None, **kwargs: Any) -> GenericResponse:
        data = _merge(params, kwargs)
        name = _pop_key(data, "conference_name")
        return self._request(
            "DELETE", f"/Conference/{name}/", data, GenericResponse, empty_ok=True
        )

    def _member_request(
        self,
        method: str,
        action: str,
        params: Params,
        extra: Mapping[str, Any],
        empty_ok: bool = False,
    ) -> GenericResponse:
        """Act on one conference member: ``/Conference/{name}/Member/{id}/{action}``."""
        data = _merge(params, extra)
        name = _pop_key(data, "conference_name")
        member_id = _pop_key(data, "member_id")
        path = f"/Conference/{name}/Member/{member_id}/{action}"
        return self._request(method, path, data, GenericResponse, empty_ok=empty_ok)

    def hangup_member(self, params: Params = None, **kwargs: Any) -> GenericResponse:
        return self._member_request("DELETE", "", params, kwargs, empty_ok=True)

    def play_member(self, params: Params = None, **kwargs: Any) -> GenericResponse:
        return self._member_request("POST", "Play/", params, kwargs)

    def stop_play_member(self, params: Params = None, **kwargs: Any) -> GenericResponse:
        return self._member_request("DELETE", "Play/", params, kwargs, empty_ok=True)

    def speak_member(self, params: Params = None, **kwargs: Any) -> GenericResponse:
        return self._member_request("POST", "Speak/", params, kwargs)

    def deaf_member(self, params: Params = None, **kwargs: Any) -> GenericResponse:
        return self._member_request("POST", "Deaf/", params, kwargs)

    def undeaf_member(self, params: Params = None, **kwargs: Any) -> GenericResponse:
        return self._member_request("DELETE", "Deaf/", params, kwargs, empty_ok=True)

    def mute_member(self, params: Params = None, **kwargs: Any) -> GenericResponse:
        return self._member_request("POST", "Mute/", params, kwargs)

    def unmute_member(self, params: Params = None, **kwargs: Any) -> GenericResponse:
        return self._member_request("DELETE", "Mute/", params, kwargs, empty_ok=True)

    def kick_member(self, params: Params = None, **kwargs: Any) -> GenericResponse:
        return self._member_request("POST", "Kick/", params, kwargs)

    def record_conference(self, params: Params = None, **kwargs: Any) -> Record:
        data = _merge(params, kwargs)
        name = _pop_key(data, "conference_name")
        return self._request("POST", f"/Conference/{name}/Record/", data, Record)

    def stop_record_conference(self, params: Params = None, **kwargs: Any) -> GenericResponse:
        data = _merge(params, kwargs)
        name = _pop_key(data, "conference_name")
        return self._request(
            "DELETE", f"/Conference/{name}/Record/", data, GenericResponse, empty_ok=True
        )

    # ------------------------------------------------------------------
    # Endpoints
    # ------------------------------------------------------------------

    def get_endpoints(self, params: Params = None, **kwargs: Any) -> EndpointList:
        """List SIP endpoints."""
        return self._request("GET", "/Endpoint/", _merge(params, kwargs), EndpointList)

    def create_endpoint(self, params: Params = None, **kwargs: Any) -> CreateEndpoint:
        return self._request("POST", "/Endpoint/", _merge(params, kwargs), CreateEndpoint)

    def get_endpoint(self, params: Params = None, **kwargs: Any) -> Endpoint:
        data = _merge(params, kwargs)
        endpoint_id = _pop_key(data, "endpoint_id")
        return self._request("GET", f"/Endpoint/{endpoint_id}/", data, Endpoint)

    def modify_endpoint(self, params: Params = None, **kwargs: Any) -> GenericResponse:
        data = _merge(params, kwargs)
        endpoint_id = _pop_key(data, "endpoint_id")
        return self._request("POST", f"/Endpoint/{endpoint_id}/", data, GenericResponse)

    def delete_endpoint(self, params: Params = None, **kwargs: Any) -> GenericResponse:
        data = _merge(params, kwargs)
        endpoint_id = _pop_key(data, "endpoint_id")
        return self._request(
            "DELETE", f"/Endpoint/{endpoint_id}/", data, GenericResponse, empty_ok=True
        )

    # ------------------------------------------------------------------
    # Messages
    # ------------------------------------------------------------------

    def send_message(self, params: Params = None, **kwargs: Any) -> MessageResponse:
        """Send an SMS. Typical parameters are ``src``, ``dst`` and ``text``."""
        return self._request("POST", "/Message/", _merge(params, kwargs), MessageResponse)

    def get_message(self, params: Params = None, **kwargs: Any) -> Message:
        data = _merge(params, kwargs)
        record_id = _pop_key(data, "record_id")
        return self._request("GET", f"/Message/{record_id}/", data, Message)

    def get_messages(self, params: Params = None, **kwargs: Any) -> MessageList:
        return self._request("GET", "/Message/", _merge(params, kwargs), MessageList)

    # ------------------------------------------------------------------
    # Incoming carriers
    # ------------------------------------------------------------------

    def get_incoming_carriers(self, params: Params = None, **kwargs: Any) -> IncomingCarrierList:
        return self._request(
            "GET", "/IncomingCarrier/", _merge(params, kwargs), IncomingCarrierList
        )

    def get_incoming_carrier(self, params: Params = None, **kwargs: Any) -> IncomingCarrier:
        data = _merge(params, kwargs)
        carrier_id = _pop_key(data, "carrier_id")
        return self._request("GET", f"/IncomingCarrier/{carrier_id}/", data, IncomingCarrier)

    def create_incoming_carrier(self, params: Params = None, **kwargs: Any) -> GenericResponse:
        return self._request(
            "POST", "/IncomingCarrier/", _merge(params, kwargs), GenericResponse
        )

    def modify_incoming_carrier(self, params: Params = None, **kwargs: Any) -> GenericResponse:
        data = _merge(params, kwargs)
        carrier_id = _pop_key(data, "carrier_id")
        return self._request("POST", f"/IncomingCarrier/{carrier_id}/", data, GenericResponse)

    def delete_incoming_carrier(self, params: Params = None, **kwargs: Any) -> GenericResponse:
        data = _merge(params, kwargs)
        carrier_id = _pop_key(data, "carrier_id")
        return self._request(
            "DELETE", f"/IncomingCarrier/{carrier_id}/", data, GenericResponse, empty_ok=True
        )

    # ------------------------------------------------------------------
    # Outgoing carriers
    # ------------------------------------------------------------------

    def get_outgoing_carriers(self, params: Params = None, **kwargs: Any) -> OutgoingCarrierList:
        return self._request(
            "GET", "/OutgoingCarrier/", _merge(params, kwargs), OutgoingCarrierList
        )

    def get_outgoing_carrier(self, params: Params = None, **kwargs: Any) -> OutgoingCarrier:
        data = _merge(params, kwargs)
        carrier_id = _pop_key(data, "carrier_id")
        return self._request("GET", f"/OutgoingCarrier/{carrier_id}/", data, OutgoingCarrier)

    def create_outgoing_carrier(self, params: Params = None, **kwargs: Any) -> GenericResponse:
        return self._request(
            "POST", "/OutgoingCarrier/", _merge(params, kwargs), GenericResponse
        )

    def modify_outgoing_carrier(self, params: Params = None, **kwargs: Any) -> GenericResponse:
        data = _merge(params, kwargs)
        carrier_id = _pop_key(data, "carrier_id")
        return self._request("POST", f"/OutgoingCarrier/{carrier_id}/", data, GenericResponse)

    def delete_outgoing_carrier(self, params: Params = None, **kwargs: Any) -> GenericResponse:
        data = _merge(params, kwargs)
        carrier_id = _pop_key(data, "carrier_id")
        return self._request(
            "DELETE", f"/OutgoingCarrier/{carrier_id}/", data, GenericResponse, empty_ok=True
        )

    # ------------------------------------------------------------------
    # Outgoing carrier routings
    # ------------------------------------------------------------------

    def get_outgoing_carrier_routings(
        self, params: Params = None, **kwargs: Any
    ) -> OutgoingCarrierRoutingList:
        return self._request(
            "GET", "/OutgoingCarrierRouting/", _merge(params, kwargs), OutgoingCarrierRoutingList
        )

    def get_outgoing_carrier_routing(
        self, params: Params = None, **kwargs: Any
    ) -> OutgoingCarrierRouting:
        data = _merge(params, kwargs)
        routing_id = _pop_key(data, "routing_id")
        return self._request(
            "GET", f"/OutgoingCarrierRouting/{routing_id}/", data, OutgoingCarrierRouting
        )

    def create_outgoing_carrier_routing(
        self, params: Params = None, **kwargs: Any
    ) -> GenericResponse:
        return self._request(
            "POST", "/OutgoingCarrierRouting/", _merge(params, kwargs), GenericResponse
        )

    def modify_outgoing_carrier_routing(
        self, params: Params = None, **kwargs: Any
    ) -> GenericResponse:
        data = _merge(params, kwargs)
        routing_id = _pop_key(data, "routing_id")
        return self._request(
            "POST", f"/OutgoingCarrierRouting/{routing_id}/", data, GenericResponse
        )

    def delete_outgoing_carrier_routing(
        self, params: Params = None, **kwargs: Any
    ) -> GenericResponse:
        data = _merge(params, kwargs)
        routing_id = _pop_key(data, "routing_id")
        return self._request(
            "DELETE",
            f"/OutgoingCarrierRouting/{routing_id}/",
            data,
            GenericResponse,
            empty_ok=True,
        )

    # ------------------------------------------------------------------
    # Pricing
    # ------------------------------------------------------------------

    def pricing(self, params: Params = None, **kwargs: Any) -> Pricing:
        """Fetch voice, SMS and number pricing for ``country_iso``."""
        return self._request("GET", "/Pricing/", _merge(params, kwargs), Pricing)
