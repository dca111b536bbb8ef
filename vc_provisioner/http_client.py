"""
Bearer-token authenticated POSTs against the validator client API.

Every failure surfaces as a RequestError subclass:
- TransportError for anything `requests` raises (no retries; a timeout is final)
- NotFoundError for status 404
- HTTPStatusError for any other non-200 status, carrying the raw body
"""

import json
from typing import Any, Optional, Union

import requests

from vc_provisioner.errors import HTTPStatusError, NotFoundError, TransportError

TIMEOUT_SECS = 10.0


def auth_headers(auth_token: str) -> dict:
    return {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {auth_token}",
    }


class AuthClient:
    def __init__(self, timeout: float = TIMEOUT_SECS, session: Optional[requests.Session] = None):
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()

    def post(self, url: str, body: Union[bytes, Any], auth_token: str) -> bytes:
        """POST ``body`` as JSON and return the raw 200 response body."""
        payload = body if isinstance(body, bytes) else json.dumps(body).encode("utf-8")
        try:
            response = self.session.post(url, data=payload, headers=auth_headers(auth_token),
                                         timeout=self.timeout)
        except requests.RequestException as e:
            raise TransportError(url, f"request error: {e}") from e

        try:
            # drain the body before the connection goes back to the pool
            data = response.content
        except requests.RequestException as e:
            raise TransportError(url, f"read response error: {e}") from e
        finally:
            response.close()

        if response.status_code != 200:
            if response.status_code == 404:
                raise NotFoundError(url)
            raise HTTPStatusError(url, response.status_code, data.decode("utf-8", errors="replace"))
        return data

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "AuthClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
