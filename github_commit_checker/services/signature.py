"""Webhook signature verification."""

import hashlib
import hmac

# Variable length digests cannot back an HMAC
SUPPORTED_ALGORITHMS = frozenset(
    algorithm for algorithm in hashlib.algorithms_guaranteed if not algorithm.startswith("shake_")
)


class SignatureVerificationError(Exception):
    """Webhook delivery failed signature verification."""


def compute_signature(body: bytes, secret: str, algorithm: str = "sha1") -> str:
    """Compute the ``X-Hub-Signature`` header value for a body."""
    digest = hmac.new(secret.encode("utf-8"), body, algorithm).hexdigest()
    return f"{algorithm}={digest}"


def verify_signature(body: bytes, signature_header: str | None, secret: str | None) -> None:
    """Verify a delivery against the shared webhook secret.

    Verification is skipped when no secret is configured.

    Args:
    ----
        body: Raw request body
        signature_header: Value of the ``X-Hub-Signature`` header
        secret: Shared webhook secret

    Raises:
    ------
        SignatureVerificationError: If the header is missing, uses an
            unsupported algorithm or does not match

    """
    if not secret:
        return
    if not signature_header:
        msg = "HTTP header 'X-Hub-Signature' is missing."
        raise SignatureVerificationError(msg)

    algorithm, _, received = signature_header.partition("=")
    if algorithm not in SUPPORTED_ALGORITHMS:
        msg = f"Hash algorithm '{algorithm}' is not supported."
        raise SignatureVerificationError(msg)

    expected = hmac.new(secret.encode("utf-8"), body, algorithm).hexdigest()
    if not hmac.compare_digest(expected.encode("ascii"), received.encode("utf-8")):
        msg = "Hook secret does not match."
        raise SignatureVerificationError(msg)
