"""HTTP plumbing shared by the student and course lookup clients."""

from typing import Generic, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError

from registrar.core import error_mapper
from registrar.core.errors import UpstreamUnavailableError
from registrar.core.logging import get_logger

logger = get_logger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


def build_http_client(base_url: str, timeout_seconds: float) -> httpx.AsyncClient:
    """Pooled async client for one upstream; owned and closed by the app lifespan."""
    return httpx.AsyncClient(
        base_url=base_url,
        timeout=timeout_seconds,
        headers={"Accept": "application/json"},
    )


class RemoteLookupClient(Generic[RecordT]):
    """
    Resolve an identifier with a single GET against an upstream service.

    Subclasses set ``role`` (used in error messages), ``path`` (collection
    path on the upstream) and ``record_type``.

    Status handling:
        200       -> parsed record
        404       -> <role> not found
        400 / 422 -> <role> id invalid
        other     -> upstream unavailable
    Transport errors and timeouts are reported as upstream unavailable.
    """

    role: str
    path: str
    record_type: type[RecordT]

    def __init__(self, http: httpx.AsyncClient):
        self._http = http

    async def _fetch(self, identifier: str) -> RecordT:
        url = f"{self.path}/{quote(identifier, safe='')}"
        try:
            response = await self._http.get(url)
        except httpx.HTTPError as exc:
            logger.warning(
                "remote.lookup_failed",
                role=self.role,
                identifier=identifier,
                error=type(exc).__name__,
            )
            raise error_mapper.from_transport_error(self.role, identifier, exc) from exc

        if response.status_code != httpx.codes.OK:
            logger.info(
                "remote.lookup_rejected",
                role=self.role,
                identifier=identifier,
                status_code=response.status_code,
            )
            raise error_mapper.from_upstream_status(self.role, identifier, response.status_code)

        try:
            return self.record_type.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            logger.warning(
                "remote.lookup_malformed",
                role=self.role,
                identifier=identifier,
            )
            raise UpstreamUnavailableError(
                self.role, identifier, reason="malformed response body"
            ) from exc
