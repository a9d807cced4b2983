from .config import VerifierSettings
from .errors import (
    ConfigurationError,
    MalformedPayloadError,
    SignatureVerificationError,
    WebhookError,
)
from .models import Event
from .receiver import WebhookReceiver
from .signature import (
    SUPPORTED_SCHEMES,
    SignatureScheme,
    WebhookSigner,
    compute_expected_signatures,
    split_header,
    verify_header,
)
from .webhook import create_event_from_payload

__all__ = [
    "VerifierSettings",
    "ConfigurationError",
    "MalformedPayloadError",
    "SignatureVerificationError",
    "WebhookError",
    "Event",
    "WebhookReceiver",
    "SUPPORTED_SCHEMES",
    "SignatureScheme",
    "WebhookSigner",
    "compute_expected_signatures",
    "split_header",
    "verify_header",
    "create_event_from_payload",
]
