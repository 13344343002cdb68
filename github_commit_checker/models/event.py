"""Pull request webhook event model."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class InvalidPayloadError(ValueError):
    """Webhook payload does not describe a pull request event."""


class PullRequestEvent(BaseModel):
    """Pull request event received from a GitHub webhook delivery."""

    model_config = ConfigDict(frozen=True)

    action: str
    commit_count: int
    pull_number: int
    head_repo_full_name: str
    base_repo_full_name: str | None = None

    def __repr__(self) -> str:
        return f"<PullRequestEvent(action={self.action}, pull_number={self.pull_number})>"

    @property
    def is_closed(self) -> bool:
        """Check if the pull request was closed by this event."""
        return self.action == "closed"

    @classmethod
    def from_payload(cls, payload: Any) -> "PullRequestEvent":
        """Create instance from a decoded webhook payload.

        Raises:
        ------
            InvalidPayloadError: If the payload lacks pull request fields

        """
        if not isinstance(payload, dict):
            msg = "Payload is not a JSON object"
            raise InvalidPayloadError(msg)
        if "pull_request" not in payload or "action" not in payload:
            msg = "No pull request data"
            raise InvalidPayloadError(msg)

        pull_request = payload["pull_request"]
        try:
            head_repo = pull_request["head"]["repo"]["full_name"]
            base_repo = ((pull_request.get("base") or {}).get("repo") or {}).get("full_name")
            if base_repo is None:
                base_repo = (payload.get("repository") or {}).get("full_name")
            return cls(
                action=payload["action"],
                commit_count=pull_request["commits"],
                pull_number=pull_request["number"],
                head_repo_full_name=head_repo,
                base_repo_full_name=base_repo,
            )
        except (KeyError, TypeError, AttributeError, ValueError) as e:
            msg = f"Incomplete pull request data: {e!s}"
            raise InvalidPayloadError(msg) from e
