"""Run configuration and validator client endpoint construction."""

from dataclasses import dataclass

DEFAULT_VC_URL = "http://localhost:5062"
DEFAULT_TIMEOUT_SECS = 10.0
# Lighthouse serialises keystore imports behind an internal lock; back-to-back
# requests for many keys pile up on it.
DEFAULT_DELAY_SECS = 0.5


@dataclass(frozen=True)
class ProvisionConfig:
    auth_token: str = ""
    fee_recipient: str = ""
    password: str = ""
    key_path: str = ""
    import_keys: bool = False
    set_fee_recipient: bool = False
    debug: bool = False
    vc_url: str = DEFAULT_VC_URL
    timeout: float = DEFAULT_TIMEOUT_SECS
    delay: float = DEFAULT_DELAY_SECS

    @property
    def base_url(self) -> str:
        return self.vc_url.rstrip("/")

    def import_url(self) -> str:
        return f"{self.base_url}/lighthouse/validators/keystore"

    def fee_recipient_url(self, pubkey: str) -> str:
        return f"{self.base_url}/eth/v1/validator/{pubkey}/feerecipient"
