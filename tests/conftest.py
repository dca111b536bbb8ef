"""Pytest configuration and shared fixtures."""

import json
import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import pytest
import requests

PUBKEY = "a" * 96

KEYSTORE: Dict[str, Any] = {
    "crypto": {
        "kdf": {
            "function": "scrypt",
            "params": {"dklen": 32, "n": 262144, "r": 8, "p": 1, "salt": "ab" * 32},
            "message": "",
        },
        "checksum": {"function": "sha256", "params": {}, "message": "cd" * 32},
        "cipher": {"function": "aes-128-ctr", "params": {"iv": "ef" * 16}, "message": "01" * 32},
    },
    "description": "",
    "pubkey": PUBKEY,
    "path": "m/12381/3600/0/0/0",
    "uuid": "1d85ae20-35c5-4611-98e8-aa14a633906f",
    "version": 4,
}


class FakeResponse:
    def __init__(self, status_code: int = 200, body: bytes = b"", read_error: Optional[Exception] = None):
        self.status_code = status_code
        self._body = body
        self._read_error = read_error
        self.closed = False

    @property
    def content(self) -> bytes:
        if self._read_error is not None:
            raise self._read_error
        return self._body

    def close(self) -> None:
        self.closed = True


class FakeSession:
    """Stands in for requests.Session; replies are consumed in order."""

    def __init__(self, *replies):
        self.replies = list(replies)
        self.calls: List[Dict[str, Any]] = []
        self.closed = False

    def post(self, url, data=None, headers=None, timeout=None):
        self.calls.append({"url": url, "data": data, "headers": headers, "timeout": timeout})
        reply = self.replies.pop(0) if self.replies else FakeResponse(200, b"")
        if isinstance(reply, Exception):
            raise reply
        return reply

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def logger(caplog) -> logging.Logger:
    caplog.set_level(logging.DEBUG, logger="vc_provisioner.test")
    return logging.getLogger("vc_provisioner.test")


@pytest.fixture
def write_keystore(tmp_path: Path) -> Callable[..., Path]:
    def write(name: str, content: Any = None) -> Path:
        path = tmp_path / name
        if content is None:
            content = KEYSTORE
        if isinstance(content, (bytes, str)):
            path.write_bytes(content if isinstance(content, bytes) else content.encode())
        else:
            path.write_text(json.dumps(content))
        return path

    return write


@pytest.fixture
def connection_refused() -> requests.ConnectionError:
    return requests.ConnectionError("[Errno 111] Connection refused")
