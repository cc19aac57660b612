from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple, Union

import httpx

from linkview.core import config
from linkview.core import http
from linkview.services.results.linkset import LinkResultSet

logger = logging.getLogger(__name__)


class TransportFailure(Exception):
    """Network or server error while talking to the crawl service."""


class MalformedResponse(TransportFailure):
    """The service answered, but not with a ``{"websites": {...}}`` object."""


@dataclass(frozen=True)
class Success:
    links: LinkResultSet


@dataclass(frozen=True)
class Failure:
    reason: str


RequestOutcome = Union[Success, Failure]


class _Pairs(list):
    pass


def build_payload(option: str, website: str) -> dict:
    return {"option": option, "website": website}


def parse_websites(body: str) -> LinkResultSet:
    # keep raw pairs so repeated keys in the body are seen in order
    try:
        data = json.loads(body, object_pairs_hook=_Pairs)
    except ValueError as e:
        raise MalformedResponse(f"Response is not valid JSON: {e}") from e
    if not isinstance(data, _Pairs):
        raise MalformedResponse("Response is not a JSON object")

    websites: Any = None
    found = False
    for key, value in data:
        if key == "websites":
            websites, found = value, True
            break
    if not found:
        raise MalformedResponse("Response has no 'websites' field")
    if not isinstance(websites, _Pairs):
        raise MalformedResponse("'websites' is not an object")

    pairs: List[Tuple[str, bool]] = []
    for link, ok in websites:
        if not isinstance(ok, bool):
            raise MalformedResponse(f"Status of {link!r} is not a boolean")
        pairs.append((link, ok))
    return LinkResultSet(pairs)


class Transport:
    def __init__(self, endpoint: Optional[str] = None):
        self.endpoint = endpoint or config.endpoint()

    async def fetch(self, option: str, website: str) -> LinkResultSet:
        payload = build_payload(option, website)
        logger.debug("POST %s %s", self.endpoint, payload)
        async with http.async_client() as client:
            try:
                r = await client.post(
                    self.endpoint,
                    content=json.dumps(payload),
                    headers={"Content-Type": "application/json"},
                )
            except (httpx.HTTPError, httpx.InvalidURL) as e:
                raise TransportFailure(
                    f"Could not reach {self.endpoint}: {str(e) or type(e).__name__}"
                ) from e
        if not r.is_success:
            raise TransportFailure(
                f"Service answered {r.status_code} {r.reason_phrase}".rstrip()
            )
        return parse_websites(r.text)

    async def send(self, option: str, website: str) -> RequestOutcome:
        try:
            links = await self.fetch(option, website)
        except TransportFailure as e:
            logger.warning("Request for %r failed: %s", website, e)
            return Failure(str(e))
        logger.debug("Received %d links for %r", len(links), website)
        return Success(links)
