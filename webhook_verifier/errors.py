from typing import Any


class WebhookError(Exception):
    """Base class for every error raised while decoding a webhook."""


class MalformedPayloadError(WebhookError, ValueError):
    """The payload is not a JSON object."""


class ConfigurationError(WebhookError, ValueError):
    """The caller asked for verification without supplying a secret."""


class SignatureVerificationError(WebhookError):
    """No signature in the header matched the payload.

    Carries the header and bodies for the caller's own logging. The secret
    and the expected signatures are never attached.
    """

    def __init__(
        self,
        message: str,
        sig_header: str | None,
        http_body: str | bytes | None = None,
        json_body: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.sig_header = sig_header
        self.http_body = http_body
        self.json_body = json_body
