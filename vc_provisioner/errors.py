"""Exceptions raised while loading keystores and talking to the validator client."""


class ProvisionError(Exception):
    pass


class KeystoreError(ProvisionError):
    def __init__(self, path: str, message: str):
        super().__init__(message)
        self.path = path


class FileReadError(KeystoreError):
    """The keystore file could not be read."""


class JSONParseError(KeystoreError):
    """The keystore file is not a JSON keystore object."""


class RequestError(ProvisionError):
    def __init__(self, url: str, message: str):
        super().__init__(message)
        self.url = url


class TransportError(RequestError):
    """Connection refused, timeout, DNS failure and the like; the cause is chained."""


class NotFoundError(RequestError):
    def __init__(self, url: str):
        super().__init__(url, "404 not found")


class HTTPStatusError(RequestError):
    """Any non-200, non-404 response.

    The string form is ``url: <url>, status: <code>, error-response: <body>``,
    which is what the fee recipient classifier falls back to parsing.
    """

    def __init__(self, url: str, status_code: int, body: str):
        super().__init__(url, f"url: {url}, status: {status_code}, error-response: {body}")
        self.status_code = status_code
        self.body = body
