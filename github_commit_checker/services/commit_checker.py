"""Commit rule checking service for pull requests."""

from dataclasses import dataclass, field
from typing import Any

from ..config import Settings
from ..github.client import GitHubAPIClient, GitHubAPIError
from ..models import DIFF_VIOLATIONS, Comment, Commit, PullRequestEvent, ViolationClass
from ..rules import CommentMessages, already_commented, build_comment_body, find_offending_files, has_sign_off
from ..utils import get_logger

logger = get_logger(__name__)


class RepositoryNotConfiguredError(Exception):
    """Neither the event nor the settings name the base repository."""


@dataclass(frozen=True)
class PostedComment:
    """Comment posted during a run; ``sha`` is ``None`` for pull request comments."""

    violation: ViolationClass
    sha: str | None = None
    files: tuple[str, ...] = ()


@dataclass
class CheckReport:
    """Summary of one pull request check."""

    pull_number: int
    posted: list[PostedComment] = field(default_factory=list)
    checked_commits: list[str] = field(default_factory=list)
    skipped_merge_commits: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert report to dictionary."""
        return {
            "pull_number": self.pull_number,
            "posted": [
                {"violation": comment.violation.value, "sha": comment.sha, "files": list(comment.files)}
                for comment in self.posted
            ],
            "checked_commits": self.checked_commits,
            "skipped_merge_commits": self.skipped_merge_commits,
            "errors": self.errors,
        }


class CommitChecker:
    """Service checking pull request commits against the contribution rules."""

    def __init__(self, github_client: GitHubAPIClient, settings: Settings) -> None:
        """Initialize commit checker.

        Args:
        ----
            github_client: Client used for every GitHub call
            settings: Application settings

        """
        self.github_client = github_client
        self.settings = settings
        self.messages = CommentMessages.from_settings(settings)

    def _base_repository(self, event: PullRequestEvent) -> str:
        repo = event.base_repo_full_name or self.settings.github_repository
        if not repo:
            msg = f"No base repository known for pull request #{event.pull_number}"
            raise RepositoryNotConfiguredError(msg)
        return repo

    def check_pull_request(self, event: PullRequestEvent) -> CheckReport:
        """Check every commit of a pull request and comment on violations.

        Args:
        ----
            event: Accepted pull request event

        Returns:
        -------
            CheckReport describing posted comments and per-commit errors

        Raises:
        ------
            GitHubAPIError: If the commit list cannot be fetched or the
                too-many-commits comment cannot be posted

        """
        report = CheckReport(pull_number=event.pull_number)
        base_repo = self._base_repository(event)

        if event.commit_count > self.settings.max_commits:
            self._comment_too_many_commits(event, base_repo, report)
            return report

        commits = self.github_client.list_pull_commits(base_repo, event.pull_number)
        logger.info("Checking %d commits of pull request #%d", len(commits), event.pull_number)

        for commit in commits:
            if commit.is_merge:
                logger.debug("Skipping merge commit %s", commit.sha)
                report.skipped_merge_commits.append(commit.sha)
                continue

            try:
                self.check_commit(commit, event.head_repo_full_name, base_repo, report)
            except GitHubAPIError as e:
                error_msg = f"Error checking commit {commit.sha}: {e!s}"
                logger.exception(error_msg)
                report.errors.append(error_msg)
                continue
            report.checked_commits.append(commit.sha)

        return report

    def check_commit(self, commit: Commit, head_repo: str, base_repo: str, report: CheckReport) -> None:
        """Check a single commit and post comments for new violations.

        Comments are read and written on the head repository, where the
        commit lives; the diff is read from the base repository.
        """
        existing_comments = self.github_client.list_commit_comments(head_repo, commit.sha)

        if not has_sign_off(commit.message):
            self._post_commit_comment(head_repo, commit, ViolationClass.MISSING_SIGN_OFF, existing_comments, report)

        detail = self.github_client.get_commit_detail(base_repo, commit.sha)
        offending = find_offending_files(detail.files, self.settings.tab_check_exclusions)

        for violation in DIFF_VIOLATIONS:
            files = offending[violation]
            if files:
                self._post_commit_comment(head_repo, commit, violation, existing_comments, report, files)

    def _post_commit_comment(
        self,
        repo: str,
        commit: Commit,
        violation: ViolationClass,
        existing_comments: list[Comment],
        report: CheckReport,
        files: list[str] | None = None,
    ) -> None:
        if already_commented(existing_comments, violation.marker):
            logger.debug("Commit %s already has a %s comment", commit.sha, violation.value)
            return

        body = build_comment_body(violation, self.messages, files)
        self.github_client.post_commit_comment(repo, commit.sha, body)
        report.posted.append(PostedComment(violation=violation, sha=commit.sha, files=tuple(files or ())))
        logger.info("Comment (%s) on %s: %s", violation.name, commit.sha, commit.title)

    def _comment_too_many_commits(self, event: PullRequestEvent, repo: str, report: CheckReport) -> None:
        violation = ViolationClass.TOO_MANY_COMMITS
        existing_comments = self.github_client.list_pull_comments(repo, event.pull_number)
        if already_commented(existing_comments, violation.marker):
            logger.debug("Pull request #%d already has a %s comment", event.pull_number, violation.value)
            return

        body = build_comment_body(
            violation,
            self.messages,
            commit_count=event.commit_count,
            max_commits=self.settings.max_commits,
        )
        self.github_client.post_pull_comment(repo, event.pull_number, body)
        report.posted.append(PostedComment(violation=violation))
        logger.info("Comment (%s) on pull request #%d", violation.name, event.pull_number)
