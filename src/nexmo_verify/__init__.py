"""Nexmo Verify Python client: signed SDK requests and authenticated responses."""

from nexmo_verify.client import VerifyClient
from nexmo_verify.errors import (
    DecodeError,
    InvalidSignatureError,
    MissingSignatureError,
    RemoteRejectionError,
    SignatureError,
    TransportError,
    VerifyError,
)
from nexmo_verify.flow import FlowState, SearchFlow
from nexmo_verify.signatures import (
    build_signed_parameters,
    compute_signature,
    sign_request,
    verify_response_signature,
)
from nexmo_verify.types import (
    ClientIdentity,
    Endpoints,
    RawResponse,
    SearchResponse,
    SignedRequest,
    TokenResponse,
    VerifiedResponse,
)

__all__ = [
    "ClientIdentity",
    "DecodeError",
    "Endpoints",
    "FlowState",
    "InvalidSignatureError",
    "MissingSignatureError",
    "RawResponse",
    "RemoteRejectionError",
    "SearchFlow",
    "SearchResponse",
    "SignatureError",
    "SignedRequest",
    "TokenResponse",
    "TransportError",
    "VerifiedResponse",
    "VerifyClient",
    "VerifyError",
    "build_signed_parameters",
    "compute_signature",
    "sign_request",
    "verify_response_signature",
]

__version__ = "0.0.1"
