import logging
from collections.abc import Mapping

from webhook_verifier.config import VerifierSettings
from webhook_verifier.errors import SignatureVerificationError
from webhook_verifier.models.event import Event
from webhook_verifier.webhook import create_event_from_payload

logger = logging.getLogger(__name__)


class WebhookReceiver:
    """Turns an already-received body plus its headers into a verified Event."""

    def __init__(self, secret: str | bytes, settings: VerifierSettings | None = None):
        self._secret = secret
        self.settings = settings or VerifierSettings()

    def extract_signature(self, headers: Mapping[str, str]) -> str | None:
        """Case-insensitive lookup of the configured signature header."""
        wanted = self.settings.signature_header.lower()
        for name, value in headers.items():
            if name.lower() == wanted:
                return value
        return None

    def receive(self, payload: str | bytes, headers: Mapping[str, str]) -> Event:
        sig_header = self.extract_signature(headers)
        if sig_header is None and self.settings.require_signature:
            logger.warning("Missing %s header", self.settings.signature_header)
            raise SignatureVerificationError(
                f"Missing {self.settings.signature_header} header",
                None,
                http_body=payload,
            )
        return create_event_from_payload(payload, sig_header, self._secret)

    def __repr__(self) -> str:
        return f"WebhookReceiver(settings={self.settings!r})"
