"""
Contribution rules checked on pull request commits
"""

from .comments import CommentMessages, already_commented, build_comment_body
from .diff_scanner import DiffScanResult, find_offending_files, scan_patch
from .signoff import has_sign_off

__all__ = [
    "CommentMessages",
    "already_commented",
    "build_comment_body",
    "DiffScanResult",
    "find_offending_files",
    "scan_patch",
    "has_sign_off",
]
