"""Exceptions raised by the Nexmo Verify client."""

from __future__ import annotations

from typing import Any


class VerifyError(Exception):
    """Base class for every failure surfaced by the client."""


class TransportError(VerifyError):
    """The request could not be sent or the response could not be read."""


class SignatureError(VerifyError):
    """The response could not be authenticated; its body was discarded."""


class MissingSignatureError(SignatureError):
    def __init__(self, message: str = "Missing Response Signature"):
        super().__init__(message)


class InvalidSignatureError(SignatureError):
    def __init__(self, message: str = "Invalid Response Signature"):
        super().__init__(message)


class DecodeError(VerifyError):
    """An authenticated body was not JSON or did not have the expected shape."""


class RemoteRejectionError(VerifyError):
    """The service answered with a non-zero result code.

    The message is the service's own ``result_message``.
    """

    def __init__(self, result_code: int, result_message: str, response: Any = None):
        super().__init__(result_message or f"Remote rejected request with result_code {result_code}")
        self.result_code = result_code
        self.result_message = result_message
        self.response = response
