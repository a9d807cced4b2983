import os
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_SIGNATURE_HEADER = "Webhook-Signature"

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class VerifierSettings:
    """Receiver-side settings. Secrets are passed explicitly, never configured here."""

    signature_header: str = DEFAULT_SIGNATURE_HEADER
    require_signature: bool = True

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "VerifierSettings":
        env = os.environ if environ is None else environ
        require = env.get("WEBHOOK_REQUIRE_SIGNATURE")
        return cls(
            signature_header=env.get("WEBHOOK_SIGNATURE_HEADER", DEFAULT_SIGNATURE_HEADER),
            require_signature=True if require is None else require.strip().lower() in _TRUE_VALUES,
        )
