"""
Fee recipient error classification.

Lighthouse answers some fee recipient updates with a non-200 status and a body
of ``null`` when there is nothing to change. Those are reported as success;
everything else is a genuine failure. The key import path does not get this
treatment.
"""

import logging

from vc_provisioner.errors import HTTPStatusError, NotFoundError, TransportError

ERROR_RESPONSE_PREFIX = "error-response:"
BENIGN_BODY = "null"


def extract_error_response(message: str) -> str:
    """Return the text after ``error-response:`` in a formatted error, or ''."""
    for part in message.split(","):
        part = part.strip()
        if part.startswith(ERROR_RESPONSE_PREFIX):
            return part[len(ERROR_RESPONSE_PREFIX):].strip()
    return ""


def is_benign_fee_recipient_error(error: Exception) -> bool:
    if isinstance(error, (TransportError, NotFoundError)):
        return False
    if isinstance(error, HTTPStatusError):
        return error.body.strip() == BENIGN_BODY
    return extract_error_response(str(error)) == BENIGN_BODY


def report_fee_recipient_error(error: Exception, logger: logging.Logger) -> bool:
    """Log the outcome of a failed fee recipient call. Returns True if it was benign."""
    if is_benign_fee_recipient_error(error):
        logger.info("Fee recipient set successfully.")
        return True
    logger.error("fee recipient set error: %s", error)
    return False
