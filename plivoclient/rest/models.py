"""Response records for the REST API.

Each record mirrors one JSON resource returned by the platform. Records are
populated from a single response and never mutated afterwards. Fields the
platform adds later are kept as extra attributes rather than dropped.

Every record carries ``error``: callers check it (or :attr:`ok`) instead of
catching exceptions for remote failures.
"""

from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

Amount = Optional[Union[float, str]]


class PlivoResponse(BaseModel):
    """Fields shared by every response record."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    api_id: Optional[str] = None
    error: Optional[str] = None
    status_code: Optional[int] = Field(default=None, exclude=True)

    @property
    def ok(self) -> bool:
        return not self.error


class ListMeta(BaseModel):
    """Pagination block attached to list responses."""

    model_config = ConfigDict(extra="allow")

    limit: Optional[int] = None
    offset: Optional[int] = None
    next: Optional[str] = None
    previous: Optional[str] = None
    total_count: Optional[int] = None


class GenericResponse(PlivoResponse):
    """Acknowledgement returned by most modify/delete/action endpoints."""

    message: Optional[str] = None


# ---------------------------------------------------------------------------
# Accounts
# ---------------------------------------------------------------------------

class Account(PlivoResponse):
    auth_id: Optional[str] = None
    auto_recharge: Optional[bool] = None
    billing_mode: Optional[str] = None
    cash_credits: Amount = None
    city: Optional[str] = None
    state: Optional[str] = None
    timezone: Optional[str] = None
    resource_uri: Optional[str] = None


class SubAccount(PlivoResponse):
    account: Optional[str] = None
    auth_id: Optional[str] = None
    auth_token: Optional[str] = None
    created: Optional[str] = None
    modified: Optional[str] = None
    name: Optional[str] = None
    enabled: Optional[bool] = None
    resource_uri: Optional[str] = None


class SubAccountList(PlivoResponse):
    meta: Optional[ListMeta] = None
    objects: list[SubAccount] = Field(default_factory=list)


class CreateSubAccount(PlivoResponse):
    message: Optional[str] = None
    auth_id: Optional[str] = None
    auth_token: Optional[str] = None


# ---------------------------------------------------------------------------
# Applications
# ---------------------------------------------------------------------------

class Application(PlivoResponse):
    app_id: Optional[str] = None
    app_name: Optional[str] = None
    answer_url: Optional[str] = None
    answer_method: Optional[str] = None
    default_app: Optional[bool] = None
    enabled: Optional[bool] = None
    fallback_answer_url: Optional[str] = None
    fallback_method: Optional[str] = None
    hangup_url: Optional[str] = None
    hangup_method: Optional[str] = None
    message_url: Optional[str] = None
    message_method: Optional[str] = None
    production_app: Optional[bool] = None
    public_uri: Optional[bool] = None
    resource_uri: Optional[str] = None
    sip_uri: Optional[str] = None
    sub_account: Optional[str] = None


class ApplicationList(PlivoResponse):
    meta: Optional[ListMeta] = None
    objects: list[Application] = Field(default_factory=list)


class CreateApplication(PlivoResponse):
    message: Optional[str] = None
    app_id: Optional[str] = None


# ---------------------------------------------------------------------------
# Numbers
# ---------------------------------------------------------------------------

class Number(PlivoResponse):
    number: Optional[str] = None
    carrier: Optional[str] = None
    added_on: Optional[str] = None
    application: Optional[str] = None
    fax_enabled: Optional[bool] = None
    number_type: Optional[str] = None
    region: Optional[str] = None
    resource_uri: Optional[str] = None
    sms_enabled: Optional[bool] = None
    sms_rate: Amount = None
    voice_enabled: Optional[bool] = None
    voice_rate: Amount = None
    monthly_rental_rate: Amount = None


class NumberList(PlivoResponse):
    meta: Optional[ListMeta] = None
    objects: list[dict[str, Any]] = Field(default_factory=list)


class NumberResponse(PlivoResponse):
    """Result of renting numbers from a number group."""

    status: Optional[str] = None
    message: Optional[str] = None
    numbers: list[dict[str, Any]] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Calls
# ---------------------------------------------------------------------------

class CDR(PlivoResponse):
    """Call detail record of a completed call."""

    call_uuid: Optional[str] = None
    parent_call_uuid: Optional[str] = None
    bill_duration: Optional[int] = None
    billed_duration: Optional[int] = None
    call_duration: Optional[int] = None
    end_time: Optional[str] = None
    from_number: Optional[str] = None
    to_number: Optional[str] = None
    call_direction: Optional[str] = None
    total_rate: Amount = None
    total_amount: Amount = None
    resource_uri: Optional[str] = None


class CDRList(PlivoResponse):
    meta: Optional[ListMeta] = None
    objects: list[CDR] = Field(default_factory=list)


class LiveCall(PlivoResponse):
    call_uuid: Optional[str] = None
    call_status: Optional[str] = None
    caller_name: Optional[str] = None
    direction: Optional[str] = None
    from_: Optional[str] = Field(default=None, alias="from")
    to: Optional[str] = None
    session_start: Optional[str] = None


class LiveCallList(PlivoResponse):
    calls: list[str] = Field(default_factory=list)


class Call(PlivoResponse):
    """Result of placing an outbound call."""

    message: Optional[str] = None
    request_uuid: Optional[str] = None


class BulkCall(PlivoResponse):
    message: Optional[str] = None
    request_uuids: list[str] = Field(default_factory=list)


class Record(PlivoResponse):
    """Result of starting a call or conference recording."""

    message: Optional[str] = None
    url: Optional[str] = None
    recording_id: Optional[str] = None


# ---------------------------------------------------------------------------
# Conferences
# ---------------------------------------------------------------------------

class Conference(PlivoResponse):
    conference_name: Optional[str] = None
    conference_member_count: Optional[Union[int, str]] = None
    conference_run_time: Optional[Union[int, str]] = None
    members: list[dict[str, Any]] = Field(default_factory=list)


class LiveConferenceList(PlivoResponse):
    conferences: list[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

class Endpoint(PlivoResponse):
    endpoint_id: Optional[str] = None
    alias: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    resource_uri: Optional[str] = None
    sip_uri: Optional[str] = None


class EndpointList(PlivoResponse):
    meta: Optional[ListMeta] = None
    objects: list[Endpoint] = Field(default_factory=list)


class CreateEndpoint(PlivoResponse):
    message: Optional[str] = None
    endpoint_id: Optional[str] = None
    alias: Optional[str] = None
    username: Optional[str] = None


# ---------------------------------------------------------------------------
# Messages
# ---------------------------------------------------------------------------

class Message(PlivoResponse):
    message_uuid: Optional[str] = None
    message_direction: Optional[str] = None
    message_state: Optional[str] = None
    message_time: Optional[str] = None
    from_number: Optional[str] = None
    to_number: Optional[str] = None
    total_rate: Amount = None
    total_amount: Amount = None


class MessageList(PlivoResponse):
    meta: Optional[ListMeta] = None
    objects: list[Message] = Field(default_factory=list)


class MessageResponse(PlivoResponse):
    message: Optional[str] = None
    message_uuid: list[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Carriers
# ---------------------------------------------------------------------------

class IncomingCarrier(PlivoResponse):
    carrier_id: Optional[str] = None
    name: Optional[str] = None
    ip_set: Optional[str] = None
    sms: Optional[bool] = None
    voice: Optional[bool] = None
    resource_uri: Optional[str] = None


class IncomingCarrierList(PlivoResponse):
    meta: Optional[ListMeta] = None
    objects: list[IncomingCarrier] = Field(default_factory=list)


class OutgoingCarrier(PlivoResponse):
    carrier_id: Optional[str] = None
    name: Optional[str] = None
    address: Optional[str] = None
    prefix: Optional[str] = None
    failover_address: Optional[str] = None
    failover_prefix: Optional[str] = None
    enabled: Optional[bool] = None
    ips: Optional[str] = None
    retries: Optional[Union[int, str]] = None
    resource_uri: Optional[str] = None


class OutgoingCarrierList(PlivoResponse):
    meta: Optional[ListMeta] = None
    objects: list[OutgoingCarrier] = Field(default_factory=list)


class OutgoingCarrierRouting(PlivoResponse):
    routing_id: Optional[str] = None
    digits: Optional[str] = None
    outgoing_carrier: Optional[str] = None
    priority: Optional[Union[int, str]] = None
    resource_uri: Optional[str] = None


class OutgoingCarrierRoutingList(PlivoResponse):
    meta: Optional[ListMeta] = None
    objects: list[OutgoingCarrierRouting] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Pricing
# ---------------------------------------------------------------------------

class Pricing(PlivoResponse):
    country: Optional[str] = None
    country_code: Optional[Union[int, str]] = None
    country_iso: Optional[str] = None
    message: Optional[dict[str, Any]] = None
    phone_numbers: Optional[dict[str, Any]] = None
    voice: Optional[dict[str, Any]] = None
