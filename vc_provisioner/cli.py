"""
provision-validators — import keystores into a Lighthouse validator client and
set their fee recipient via its HTTP API.

Constraints:
- Only keystore-*.json files in --keypath are used; bad files are skipped.
- No retries; a failed call is logged and the run continues.
- The run always exits 0; only invalid arguments exit 1.
- --vc-url defaults to http://localhost:5062

Example:
  provision-validators \
      --keypath ./validator_keys \
      --password 'keystore password' \
      --token-file ./api-token.txt \
      --feeRecipient 0x25c4a76E7d118705e7Ea2e9b7d8C59930d8aCD3b \
      --key --fee
"""

import argparse
import os
import sys
from typing import List, Optional

from vc_provisioner.config import (DEFAULT_DELAY_SECS, DEFAULT_TIMEOUT_SECS, DEFAULT_VC_URL,
                                   ProvisionConfig)
from vc_provisioner.http_client import AuthClient
from vc_provisioner.keystore import load_keystores
from vc_provisioner.log import configure_logging
from vc_provisioner.workflow import Provisioner


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="provision-validators",
                                description="Import validator keystores and set fee recipients")
    p.add_argument("--auth", default="",
                   help="validator client API auth token")
    p.add_argument("--token-file", "-t", default=None,
                   help="read the auth token from this file instead of --auth")
    p.add_argument("--feeRecipient", dest="fee_recipient", default="",
                   help="0x-prefixed fee recipient address (40 hex chars)")
    p.add_argument("--password", default="",
                   help="validator keystore password")
    p.add_argument("--keypath", dest="key_path", default="",
                   help="directory holding keystore-*.json files")
    p.add_argument("--key", dest="import_keys", action="store_true",
                   help="import the keystores")
    p.add_argument("--fee", dest="set_fee_recipient", action="store_true",
                   help="set the fee recipient of each keystore's validator")
    p.add_argument("--debug", action="store_true",
                   help="log at debug level")
    p.add_argument("--vc-url", default=DEFAULT_VC_URL,
                   help="Validator Client base URL (default: %(default)s)")
    p.add_argument("--timeout", type=float, default=DEFAULT_TIMEOUT_SECS,
                   help="per-request timeout in seconds (default: %(default)s)")
    p.add_argument("--delay", type=float, default=DEFAULT_DELAY_SECS,
                   help="pause after each request in seconds (default: %(default)s)")
    return p.parse_args(argv)


def die(msg: str) -> None:
    print(f"ERROR: {msg}", file=sys.stderr)
    sys.exit(1)


def read_token(path: str) -> str:
    if not os.path.isfile(path):
        die(f"token file not found: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            token = f.read().strip()
    except OSError as e:
        die(f"error reading token file {path}: {e}")
    if not token:
        die(f"token file {path} is empty")
    return token


def validate_eth_address(addr: str) -> str:
    a = addr.strip()
    if not (a.startswith("0x") and len(a) == 42):
        die("fee recipient must be 0x + 40 hex chars")
    try:
        bytes.fromhex(a[2:])
    except ValueError:
        die("fee recipient is not valid hex")
    return a


def build_config(args: argparse.Namespace) -> ProvisionConfig:
    token = read_token(args.token_file) if args.token_file else args.auth
    fee_recipient = args.fee_recipient
    if args.set_fee_recipient:
        fee_recipient = validate_eth_address(fee_recipient)
    return ProvisionConfig(
        auth_token=token,
        fee_recipient=fee_recipient,
        password=args.password,
        key_path=args.key_path,
        import_keys=args.import_keys,
        set_fee_recipient=args.set_fee_recipient,
        debug=args.debug,
        vc_url=args.vc_url,
        timeout=args.timeout,
        delay=args.delay,
    )


def main(argv: Optional[List[str]] = None) -> None:
    config = build_config(parse_args(argv))
    logger = configure_logging(config.debug)

    with AuthClient(timeout=config.timeout) as client:
        provisioner = Provisioner(config, client, logger)
        summary = provisioner.run(load_keystores(config.key_path, logger))

    logger.debug("provisioned %d keystores: imported %d (%d failed), "
                 "fee recipient set %d (%d failed)",
                 summary.keystores, summary.imported, summary.import_failed,
                 summary.fee_set, summary.fee_failed)


if __name__ == "__main__":
    main()
