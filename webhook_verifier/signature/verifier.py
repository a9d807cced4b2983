import logging
import re

from webhook_verifier.signature.schemes import SUPPORTED_SCHEMES
from webhook_verifier.utils.crypto import secure_compare

logger = logging.getLogger(__name__)

_HEADER_SEPARATOR = re.compile(r",\s*")


def compute_expected_signatures(payload: str | bytes, secret: str | bytes) -> dict[str, str]:
    """Map every supported scheme id to its expected signature for payload."""
    return {
        scheme_id: scheme.compute(payload, secret)
        for scheme_id, scheme in SUPPORTED_SCHEMES.items()
    }


def split_header(header: str) -> list[tuple[str, str]]:
    """Split a signature header into (scheme, signature) pairs.

    Each comma separated token is split on its first "=". Tokens without one
    come back as (token, "") and simply never match.
    """
    pairs = []
    for token in _HEADER_SEPARATOR.split(header):
        scheme, _, signature = token.partition("=")
        pairs.append((scheme, signature))
    return pairs


def verify_header(payload: str | bytes, header: str, secret: str | bytes) -> bool:
    """Return True if the header carries at least one valid signature.

    Expected signatures are computed for every supported scheme before
    anything in the header is looked at.
    """
    expected = compute_expected_signatures(payload, secret)
    pairs = split_header(header)

    seen = [scheme for scheme, _ in pairs if scheme in SUPPORTED_SCHEMES]
    if not seen:
        logger.debug("Signature header contains no supported scheme")

    for scheme, signature in pairs:
        if scheme not in SUPPORTED_SCHEMES:
            continue
        if secure_compare(expected[scheme], signature):
            return True

    logger.debug(
        "No valid signature found in header (schemes checked: %s)",
        ", ".join(sorted(set(seen))) or "none",
    )
    return False
