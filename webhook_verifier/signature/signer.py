from collections.abc import Iterable

from webhook_verifier.signature.schemes import SignatureScheme
from webhook_verifier.signature.verifier import verify_header


class WebhookSigner:
    """Produces signature headers the way a webhook sender does."""

    def __init__(self, secret: str | bytes):
        self.secret = secret

    def sign(self, payload: str | bytes, scheme: SignatureScheme = SignatureScheme.V1) -> str:
        return scheme.compute(payload, self.secret)

    def header(
        self,
        payload: str | bytes,
        schemes: Iterable[SignatureScheme] | None = None,
        extra_signatures: Iterable[tuple[str, str]] = (),
    ) -> str:
        """Build a "scheme=signature,..." header for payload.

        Args:
            payload: Raw body exactly as it will be sent.
            schemes: Schemes to sign with (defaults to every supported one).
            extra_signatures: Additional (scheme, signature) pairs appended
                as-is, e.g. a signature made with a previous secret.
        """
        if schemes is None:
            schemes = list(SignatureScheme)
        entries = [f"{scheme.value}={self.sign(payload, scheme)}" for scheme in schemes]
        entries.extend(f"{scheme}={signature}" for scheme, signature in extra_signatures)
        return ",".join(entries)

    def verify(self, payload: str | bytes, header: str) -> bool:
        return verify_header(payload, header, self.secret)
