"""
Keystore discovery and parsing.

Only files named ``keystore-*.json`` are considered. Unreadable or malformed
files are logged and skipped; a missing directory yields nothing.
"""

import json
import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator

from vc_provisioner.errors import FileReadError, JSONParseError, KeystoreError

KEYSTORE_PREFIX = "keystore-"
KEYSTORE_SUFFIX = ".json"


@dataclass(frozen=True)
class KeystoreRecord:
    pubkey: str
    crypto: Dict[str, Any] = field(default_factory=dict)
    path: str = ""
    uuid: str = ""
    version: int = 0
    description: str = ""

    @property
    def prefixed_pubkey(self) -> str:
        return "0x" + self.pubkey

    def to_dict(self) -> Dict[str, Any]:
        return {
            "crypto": self.crypto,
            "description": self.description,
            "pubkey": self.pubkey,
            "path": self.path,
            "uuid": self.uuid,
            "version": self.version,
        }


def is_keystore_filename(name: str) -> bool:
    return name.startswith(KEYSTORE_PREFIX) and name.endswith(KEYSTORE_SUFFIX)


def _field(data: dict, key: str, kind: type, default: Any, file_path: str) -> Any:
    value = data.get(key, default)
    if value is None:
        return default
    # bool is an int subclass; a keystore version of `true` is still malformed
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise JSONParseError(file_path, f"parse JSON in file error: {file_path}: "
                                        f"'{key}' must be {kind.__name__}")
    return value


def parse_keystore(raw: bytes, file_path: str = "") -> KeystoreRecord:
    """Parse keystore JSON. Absent fields take empty defaults; wrong types are errors."""
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise JSONParseError(file_path, f"parse JSON in file error: {file_path}: {e}") from e
    if not isinstance(data, dict):
        raise JSONParseError(file_path, f"parse JSON in file error: {file_path}: not an object")

    return KeystoreRecord(
        pubkey=_field(data, "pubkey", str, "", file_path),
        crypto=_field(data, "crypto", dict, {}, file_path),
        path=_field(data, "path", str, "", file_path),
        uuid=_field(data, "uuid", str, "", file_path),
        version=_field(data, "version", int, 0, file_path),
        description=_field(data, "description", str, "", file_path),
    )


def read_keystore(file_path: str) -> bytes:
    try:
        with open(file_path, "rb") as f:
            return f.read()
    except OSError as e:
        raise FileReadError(file_path, f"read file error: {file_path}: {e}") from e


def load_keystores(key_path: str, logger: logging.Logger) -> Iterator[KeystoreRecord]:
    """Yield a record for every parseable ``keystore-*.json`` in ``key_path``.

    Entries come back in directory-listing order.
    """
    try:
        names = os.listdir(key_path)
    except OSError as e:
        logger.error("load keystore dir error: %s", e)
        return

    for name in names:
        if not is_keystore_filename(name):
            continue
        file_path = os.path.join(key_path, name)
        try:
            raw = read_keystore(file_path)
            record = parse_keystore(raw, file_path)
        except KeystoreError as e:
            logger.error("%s", e)
            continue
        logger.debug("keystore: %s", raw.decode("utf-8", errors="replace"))
        yield record
