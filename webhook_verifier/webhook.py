import json
import logging

from webhook_verifier.errors import (
    ConfigurationError,
    MalformedPayloadError,
    SignatureVerificationError,
)
from webhook_verifier.models.event import Event
from webhook_verifier.signature.verifier import verify_header
from webhook_verifier.utils.crypto import to_bytes

logger = logging.getLogger(__name__)


def create_event_from_payload(
    payload: str | bytes,
    sig_header: str | None = None,
    secret: str | bytes | None = None,
) -> Event:
    """Initialize an Event from a raw webhook payload.

    If a signature header is given, the signatures in it are checked against
    the payload and SignatureVerificationError is raised when none is valid.
    Without a header the event is returned unverified.

    Raises:
        MalformedPayloadError: payload is not UTF-8 text holding a JSON object.
        ConfigurationError: a header was given without a secret.
        SignatureVerificationError: no valid signature in the header.
    """
    try:
        body = to_bytes(payload)
    except UnicodeEncodeError as e:
        logger.warning("Webhook payload is not encodable as UTF-8")
        raise MalformedPayloadError("Webhook payload is not valid UTF-8 text") from e

    try:
        data = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as e:
        logger.warning("Webhook payload is not valid JSON")
        raise MalformedPayloadError("Webhook payload is not valid JSON") from e

    if not isinstance(data, dict):
        logger.warning("Webhook payload is JSON but not an object (%s)", type(data).__name__)
        raise MalformedPayloadError("Webhook payload must be a JSON object")

    event = Event.construct_from(data)

    if sig_header is None:
        logger.debug("Returning unverified event %s", event.id)
        return event

    if secret is None:
        raise ConfigurationError("You must pass a secret in order to verify signatures")

    if not verify_header(body, sig_header, secret):
        logger.warning("Rejected event %s: no valid signature in header", event.id)
        raise SignatureVerificationError(
            "No signatures found matching the expected signature for payload",
            sig_header,
            http_body=payload,
            json_body=data,
        )

    return event
