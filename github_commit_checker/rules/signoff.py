"""Commit message sign-off check."""

import re

# Anchored to a preceding newline: a sign-off on the first line is not counted.
SIGN_OFF_RE = re.compile(r"\nSigned-off-by:", re.IGNORECASE)


def has_sign_off(message: str) -> bool:
    """Check if the commit message carries a ``Signed-off-by:`` line."""
    return SIGN_OFF_RE.search(message or "") is not None
