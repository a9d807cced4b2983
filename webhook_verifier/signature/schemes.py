from enum import Enum
from types import MappingProxyType

from webhook_verifier.utils.crypto import hmac_sha256_hex


class SignatureScheme(Enum):
    """Signature schemes this library knows how to verify."""

    V1 = "v1"  # HMAC-SHA256, lowercase hex

    def compute(self, payload: str | bytes, secret: str | bytes) -> str:
        match self:
            case SignatureScheme.V1:
                return hmac_sha256_hex(payload, secret)
            case _:
                raise ValueError(f"no compute function for scheme {self.value}")


SUPPORTED_SCHEMES = MappingProxyType({scheme.value: scheme for scheme in SignatureScheme})
