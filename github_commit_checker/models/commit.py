"""Commit, diff and comment data models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Commit(BaseModel):
    """Commit listed in a pull request."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    sha: str
    message: str = ""
    parent_shas: list[str] = Field(default_factory=list)

    def __repr__(self) -> str:
        return f"<Commit(sha={self.sha[:10]}, title='{self.title[:50]}')>"

    @property
    def is_merge(self) -> bool:
        """Check if the commit merges two or more branches."""
        return len(self.parent_shas) > 1

    @property
    def title(self) -> str:
        """First line of the commit message."""
        return self.message.split("\n", 1)[0]

    @classmethod
    def from_github_data(cls, github_data: dict[str, Any]) -> "Commit":
        """Create instance from GitHub API data."""
        return cls(
            sha=github_data["sha"],
            message=(github_data.get("commit") or {}).get("message") or "",
            parent_shas=[parent["sha"] for parent in github_data.get("parents") or []],
        )


class FileDiff(BaseModel):
    """Single file of a commit with its unified diff."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    filename: str
    patch: str | None = None


class CommitDetail(BaseModel):
    """Commit with its per-file patches."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    sha: str
    files: list[FileDiff] = Field(default_factory=list)

    @classmethod
    def from_github_data(cls, github_data: dict[str, Any]) -> "CommitDetail":
        """Create instance from GitHub API data."""
        return cls(
            sha=github_data["sha"],
            files=[FileDiff.model_validate(item) for item in github_data.get("files") or []],
        )


class Comment(BaseModel):
    """Comment on a commit or pull request; only the body matters here."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    body: str = ""

    @classmethod
    def from_github_data(cls, github_data: dict[str, Any]) -> "Comment":
        """Create instance from GitHub API data."""
        return cls(body=github_data.get("body") or "")
