"""Tests for webhook intake and signature verification."""

import json

import pytest

from conftest import make_pull_request_payload
from github_commit_checker.services.intake import IntakeStatus, parse_webhook_payload
from github_commit_checker.services.signature import (
    SignatureVerificationError,
    compute_signature,
    verify_signature,
)


class TestParseWebhookPayload:
    """Test payload intake."""

    def test_accepted_from_json_text(self) -> None:
        """Test a JSON encoded opened event."""
        result = parse_webhook_payload(json.dumps(make_pull_request_payload(action="opened")))

        assert result.status == IntakeStatus.ACCEPTED
        assert result.accepted
        assert result.event.pull_number == 42

    def test_accepted_from_dict(self) -> None:
        """Test an already decoded synchronize event."""
        result = parse_webhook_payload(make_pull_request_payload(action="synchronize"))

        assert result.accepted
        assert result.event.action == "synchronize"

    def test_closed_is_ignored(self) -> None:
        """Test closed pull requests are not evaluated."""
        result = parse_webhook_payload(make_pull_request_payload(action="closed"))

        assert result.status == IntakeStatus.IGNORED
        assert not result.accepted
        assert result.event.is_closed

    @pytest.mark.parametrize("payload", [None, "", b"", "{not json"])
    def test_rejected_unreadable(self, payload) -> None:
        """Test empty and malformed payloads."""
        result = parse_webhook_payload(payload)

        assert result.status == IntakeStatus.REJECTED
        assert result.event is None
        assert result.reason

    def test_rejected_without_pull_request(self) -> None:
        """Test events that are not about pull requests."""
        result = parse_webhook_payload(json.dumps({"action": "created", "issue": {}}))

        assert result.status == IntakeStatus.REJECTED
        assert result.reason == "No pull request data"


class TestVerifySignature:
    """Test webhook signature verification."""

    body = b"payload=%7B%7D"
    secret = "s3cret"

    def test_skipped_without_secret(self) -> None:
        """Test verification is disabled when no secret is configured."""
        verify_signature(self.body, None, None)
        verify_signature(self.body, "sha1=bogus", "")

    @pytest.mark.parametrize("algorithm", ["sha1", "sha256", "sha512"])
    def test_valid_signature(self, algorithm) -> None:
        """Test matching signatures pass."""
        header = compute_signature(self.body, self.secret, algorithm)

        verify_signature(self.body, header, self.secret)

    def test_missing_header(self) -> None:
        """Test deliveries without a signature header."""
        with pytest.raises(SignatureVerificationError, match="missing"):
            verify_signature(self.body, None, self.secret)

    def test_unsupported_algorithm(self) -> None:
        """Test unknown hash algorithms."""
        with pytest.raises(SignatureVerificationError, match="not supported"):
            verify_signature(self.body, "rot13=abcdef", self.secret)

    def test_header_without_algorithm(self) -> None:
        """Test a bare digest without the algorithm prefix."""
        with pytest.raises(SignatureVerificationError, match="not supported"):
            verify_signature(self.body, "abcdef", self.secret)

    def test_mismatch(self) -> None:
        """Test signatures computed with another secret."""
        header = compute_signature(self.body, "other", "sha1")

        with pytest.raises(SignatureVerificationError, match="does not match"):
            verify_signature(self.body, header, self.secret)

    def test_tampered_body(self) -> None:
        """Test signatures of a different body."""
        header = compute_signature(self.body, self.secret, "sha256")

        with pytest.raises(SignatureVerificationError, match="does not match"):
            verify_signature(self.body + b"x", header, self.secret)
