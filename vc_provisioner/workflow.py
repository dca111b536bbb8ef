"""
Per-keystore provisioning: optional key import, optional fee recipient update.

Keystores are handled one after another. Each call is followed by a fixed
pause. A failure is logged and the loop moves on to the next step or record.
"""

import json
import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable

from vc_provisioner.classifier import report_fee_recipient_error
from vc_provisioner.config import ProvisionConfig
from vc_provisioner.errors import RequestError
from vc_provisioner.http_client import AuthClient
from vc_provisioner.keystore import KeystoreRecord

REDACTED = "********"


def build_import_request(password: str, record: KeystoreRecord) -> Dict[str, Any]:
    return {"enable": True, "password": password, "keystore": record.to_dict()}


def build_fee_recipient_request(fee_recipient: str) -> Dict[str, str]:
    return {"ethaddress": fee_recipient}


@dataclass
class ProvisionSummary:
    keystores: int = 0
    imported: int = 0
    import_failed: int = 0
    fee_set: int = 0
    fee_failed: int = 0


class Provisioner:
    def __init__(self, config: ProvisionConfig, client: AuthClient, logger: logging.Logger,
                 sleep: Callable[[float], None] = time.sleep):
        self.config = config
        self.client = client
        self.logger = logger
        self.sleep = sleep

    def import_keystore(self, record: KeystoreRecord) -> bool:
        request = build_import_request(self.config.password, record)
        if self.logger.isEnabledFor(logging.DEBUG):
            shown = dict(request, password=REDACTED)
            self.logger.debug("key request: %s", json.dumps(shown))
        try:
            res = self.client.post(self.config.import_url(), request, self.config.auth_token)
        except RequestError as e:
            self.logger.error("%s", e)
            return False
        self.logger.info("%s", res.decode("utf-8", errors="replace"))
        return True

    def set_fee_recipient(self, record: KeystoreRecord) -> bool:
        request = build_fee_recipient_request(self.config.fee_recipient)
        self.logger.debug("fee request: %s", json.dumps(request))
        url = self.config.fee_recipient_url(record.prefixed_pubkey)
        try:
            self.client.post(url, request, self.config.auth_token)
        except RequestError as e:
            return report_fee_recipient_error(e, self.logger)
        return True

    def run(self, records: Iterable[KeystoreRecord]) -> ProvisionSummary:
        summary = ProvisionSummary()
        for record in records:
            summary.keystores += 1
            if self.config.import_keys:
                if self.import_keystore(record):
                    summary.imported += 1
                else:
                    summary.import_failed += 1
                self.sleep(self.config.delay)
            if self.config.set_fee_recipient:
                if self.set_fee_recipient(record):
                    summary.fee_set += 1
                else:
                    summary.fee_failed += 1
                self.sleep(self.config.delay)
        return summary
