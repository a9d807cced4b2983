import hashlib
import hmac


def to_bytes(value: str | bytes, errors: str = "strict") -> bytes:
    if isinstance(value, bytes):
        return value
    return value.encode("utf-8", errors)


def hmac_sha256_hex(payload: str | bytes, secret: str | bytes) -> str:
    """Compute the lowercase hex HMAC-SHA256 of the raw payload bytes."""
    return hmac.new(
        to_bytes(secret),
        to_bytes(payload),
        hashlib.sha256,
    ).hexdigest()


def secure_compare(expected: str, presented: str) -> bool:
    """Constant-time string equality.

    Both sides are compared as bytes so that non-ASCII input in a header
    cannot make compare_digest raise TypeError. Lone surrogates in the
    presented value are passed through and simply never match.
    """
    return hmac.compare_digest(to_bytes(expected), to_bytes(presented, "surrogatepass"))
