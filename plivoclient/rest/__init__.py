"""REST client and response records."""

from plivoclient.rest.client import INVALID_JSON, RestAPI
from plivoclient.rest.models import GenericResponse, ListMeta, PlivoResponse

__all__ = ["RestAPI", "INVALID_JSON", "PlivoResponse", "GenericResponse", "ListMeta"]
