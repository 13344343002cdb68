"""
GitHub Commit Checker

A webhook bot that inspects pull request commits and comments on commits
that break the contribution rules (sign-off, whitespace, line endings).
"""

__version__ = "1.0.0"
__author__ = "Development Team"
__email__ = "dev@example.com"
