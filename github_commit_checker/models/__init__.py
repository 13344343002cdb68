"""
Data models for the GitHub Commit Checker
"""

from .commit import Comment, Commit, CommitDetail, FileDiff
from .event import InvalidPayloadError, PullRequestEvent
from .violation import DIFF_VIOLATIONS, MARKERS, ViolationClass

__all__ = [
    "Comment",
    "Commit",
    "CommitDetail",
    "FileDiff",
    "InvalidPayloadError",
    "PullRequestEvent",
    "DIFF_VIOLATIONS",
    "MARKERS",
    "ViolationClass",
]
