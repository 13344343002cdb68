"""Violation classes and the comment markers that identify them."""

from enum import Enum


class ViolationClass(str, Enum):
    """Contribution rule a commit or pull request can break."""

    MISSING_SIGN_OFF = "sob"
    TAB_INDENTATION = "tab"
    TRAILING_WHITESPACE = "space"
    DOS_LINE_ENDING = "eol"
    TOO_MANY_COMMITS = "commits"

    @property
    def marker(self) -> str:
        """Hidden marker embedded in every comment posted for this class."""
        return MARKERS[self]

    @property
    def is_diff_based(self) -> bool:
        """Whether the class is detected from the commit diff."""
        return self in DIFF_VIOLATIONS


# Markers are matched against comments already posted on GitHub, so existing
# values must never change. Comments left by the earlier PHP hook carry no
# marker (it deduplicated on the contributing and guidelines URLs) and are not
# recognised: each commit still open from that era may get one more comment
# per class, after which the marker takes over. Matching on the URLs instead
# is not possible because every diff class links the same guidelines page.
MARKERS: dict[ViolationClass, str] = {
    ViolationClass.MISSING_SIGN_OFF: "<!-- commit-checker:SOB -->",
    ViolationClass.TAB_INDENTATION: "<!-- commit-checker:TAB -->",
    ViolationClass.TRAILING_WHITESPACE: "<!-- commit-checker:SPACE -->",
    ViolationClass.DOS_LINE_ENDING: "<!-- commit-checker:EOL -->",
    ViolationClass.TOO_MANY_COMMITS: "<!-- commit-checker:COMMITS -->",
}

DIFF_VIOLATIONS = (
    ViolationClass.TAB_INDENTATION,
    ViolationClass.TRAILING_WHITESPACE,
    ViolationClass.DOS_LINE_ENDING,
)
