from .schemes import SUPPORTED_SCHEMES, SignatureScheme
from .signer import WebhookSigner
from .verifier import compute_expected_signatures, split_header, verify_header

__all__ = [
    "SUPPORTED_SCHEMES",
    "SignatureScheme",
    "WebhookSigner",
    "compute_expected_signatures",
    "split_header",
    "verify_header",
]
