"""Comment bodies and duplicate comment detection."""

from collections.abc import Iterable
from dataclasses import dataclass

from ..models import Comment, ViolationClass

TEMPLATES: dict[ViolationClass, str] = {
    ViolationClass.MISSING_SIGN_OFF: (
        "This commit is missing Signed-Off-By line to indicate that you agree "
        "with the Developer's Certificate of Origin. Please check "
        "[contributing documentation]({contributing_url}) for more information."
    ),
    ViolationClass.TAB_INDENTATION: (
        "This commit is using tab character for indentation instead of spaces, "
        "which is mandated by the project. Please check our "
        "[Developer guidelines]({guidelines_url}#Indentation) for more information."
    ),
    ViolationClass.TRAILING_WHITESPACE: (
        "This commit adds lines ending with whitespace, which is not allowed by "
        "the project. Please check our "
        "[Developer guidelines]({guidelines_url}#Whitespace) for more information."
    ),
    ViolationClass.DOS_LINE_ENDING: (
        "This commit is using DOS line endings (CR LF) instead of Unix ones (LF), "
        "which are mandated by the project. Please check our "
        "[Developer guidelines]({guidelines_url}#Line_endings) for more information."
    ),
    ViolationClass.TOO_MANY_COMMITS: (
        "This pull request contains {commit_count} commits, which is more than "
        "the {max_commits} the bot checks. This usually means it was opened "
        "against the wrong branch. Please check the target branch and the "
        "[contributing documentation]({contributing_url})."
    ),
}


@dataclass(frozen=True)
class CommentMessages:
    """Links substituted into the comment templates."""

    contributing_url: str
    guidelines_url: str

    @classmethod
    def from_settings(cls, settings) -> "CommentMessages":
        return cls(
            contributing_url=settings.contributing_url,
            guidelines_url=settings.guidelines_url,
        )

    def render(self, violation: ViolationClass, **context) -> str:
        """Render the human readable text for a violation class."""
        return TEMPLATES[violation].format(
            contributing_url=self.contributing_url,
            guidelines_url=self.guidelines_url,
            **context,
        )


def already_commented(comments: Iterable[Comment], marker: str) -> bool:
    """Check if any of the comments carries the given marker."""
    return marker in "".join(comment.body for comment in comments)


def build_comment_body(
    violation: ViolationClass,
    messages: CommentMessages,
    files: list[str] | None = None,
    **context,
) -> str:
    """Build the full comment body for a violation.

    Args:
    ----
        violation: Violation class the comment is about
        messages: Links used in the templates
        files: Offending file names, appended for diff based classes
        **context: Extra template values (commit counts)

    Returns:
    -------
        Marker followed by the Markdown text

    """
    body = f"{violation.marker}\n{messages.render(violation, **context)}"
    if files:
        body += "\n\nOffending files: " + ", ".join(files)
    return body
