import pytest

from webhook_verifier.config import VerifierSettings
from webhook_verifier.receiver import WebhookReceiver
from webhook_verifier.signature.signer import WebhookSigner
from webhook_verifier.utils.factories import EventPayloadFactory

from tests.vectors import WEBHOOK_SECRET


@pytest.fixture
def webhook_secret():
    return WEBHOOK_SECRET


@pytest.fixture
def signer():
    return WebhookSigner(WEBHOOK_SECRET)


@pytest.fixture
def settings():
    return VerifierSettings()


@pytest.fixture
def receiver(settings):
    return WebhookReceiver(WEBHOOK_SECRET, settings=settings)


@pytest.fixture
def receiver_optional_signature():
    """Receiver that accepts requests without a signature header."""
    return WebhookReceiver(WEBHOOK_SECRET, settings=VerifierSettings(require_signature=False))


@pytest.fixture
def payload_factory():
    return EventPayloadFactory
