"""Responses from the Moki API."""

import json
from dataclasses import dataclass
from typing import Any

import httpx

from .error import DecodeError, TransportError


@dataclass(kw_only=True)
class Response:
    """The Response.

    It's sent by the Moki API following a client's request
    """

    status: int
    content: bytes

    @classmethod
    def from_httpx(cls, response: httpx.Response) -> "Response":
        """Copy what we need out of an httpx response."""
        return cls(
            status=response.status_code,
            content=response.content,
        )

    @property
    def text(self) -> str:
        """Body of the response, decoded as UTF-8."""
        try:
            return self.content.decode("utf-8")
        except UnicodeDecodeError as error:
            raise DecodeError("Response body is not valid UTF-8") from error

    def raise_for_status(self) -> None:
        """Raise a `TransportError` unless the status is 2xx."""
        if not httpx.codes.is_success(self.status):
            raise TransportError(
                f"Unexpected status {self.status}: {self.content[:200]!r}",
                status_code=self.status,
            )


def parse_json(body: str | bytes | None) -> Any:
    """Parse a JSON body, an empty body gives None.

    Raises:
        DecodeError: if the body is not valid JSON.

    """
    if not body or not body.strip():
        return None

    try:
        return json.loads(body)
    except json.JSONDecodeError as error:
        raise DecodeError(f"Invalid JSON body: {body[:200]!r}") from error
