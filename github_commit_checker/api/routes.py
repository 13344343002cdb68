"""FastAPI routes for the GitHub Commit Checker."""

from collections.abc import Iterator
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Header, HTTPException, Request
from fastapi.concurrency import run_in_threadpool

from github_commit_checker.config import Settings
from github_commit_checker.github.client import GitHubAPIClient, GitHubAPIError
from github_commit_checker.services.commit_checker import CommitChecker, RepositoryNotConfiguredError
from github_commit_checker.services.intake import IntakeStatus, parse_webhook_payload
from github_commit_checker.services.signature import SignatureVerificationError, verify_signature
from github_commit_checker.utils import get_logger

logger = get_logger(__name__)
router = APIRouter()


def get_app_settings(request: Request) -> Settings:
    """Get the settings the application was created with."""
    return request.app.state.settings


def get_commit_checker(settings: Annotated[Settings, Depends(get_app_settings)]) -> Iterator[CommitChecker]:
    """Get a commit checker bound to a GitHub client closed after the request."""
    github_client = GitHubAPIClient(settings)
    try:
        yield CommitChecker(github_client, settings)
    finally:
        github_client.close()


async def read_payload(request: Request) -> str | None:
    """Extract the JSON payload from a form-encoded or JSON delivery."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        return (await request.body()).decode("utf-8", errors="replace")

    form = await request.form()
    payload = form.get("payload")
    return payload if isinstance(payload, str) else None


@router.post("/webhook")
async def receive_webhook(
    request: Request,
    settings: Annotated[Settings, Depends(get_app_settings)],
    checker: Annotated[CommitChecker, Depends(get_commit_checker)],
    x_hub_signature: Annotated[str | None, Header()] = None,
    x_github_event: Annotated[str | None, Header()] = None,
) -> dict[str, Any]:
    """Receive a pull request webhook delivery and check its commits."""
    body = await request.body()

    try:
        verify_signature(body, x_hub_signature, settings.webhook_secret)
    except SignatureVerificationError as e:
        logger.warning("Rejected webhook delivery: %s", e)
        raise HTTPException(status_code=403, detail=str(e)) from e

    if x_github_event == "ping":
        return {"status": "pong"}

    intake = parse_webhook_payload(await read_payload(request))
    if intake.status == IntakeStatus.REJECTED:
        raise HTTPException(status_code=400, detail=intake.reason)
    if intake.status == IntakeStatus.IGNORED:
        return {"status": "ignored", "reason": intake.reason}

    try:
        report = await run_in_threadpool(checker.check_pull_request, intake.event)
    except RepositoryNotConfiguredError as e:
        logger.exception("Cannot check pull request #%d", intake.event.pull_number)
        raise HTTPException(status_code=400, detail=str(e)) from e
    except GitHubAPIError as e:
        logger.exception("Error checking pull request #%d", intake.event.pull_number)
        raise HTTPException(status_code=502, detail="GitHub API request failed") from e

    return {"status": "processed", "report": report.to_dict()}
