from .crypto import hmac_sha256_hex, secure_compare
from .factories import EventPayloadFactory

__all__ = [
    "hmac_sha256_hex", "secure_compare",
    "EventPayloadFactory",
]
