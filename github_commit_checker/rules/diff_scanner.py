"""Whitespace and line ending checks on unified diffs."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from ..models import DIFF_VIOLATIONS, FileDiff, ViolationClass


@dataclass(frozen=True)
class DiffScanResult:
    """Violations found in the added lines of one patch."""

    tabs: bool = False
    trailing_whitespace: bool = False
    dos_line_endings: bool = False

    def has(self, violation: ViolationClass) -> bool:
        """Check if the patch breaks the given diff rule."""
        if violation == ViolationClass.TAB_INDENTATION:
            return self.tabs
        if violation == ViolationClass.TRAILING_WHITESPACE:
            return self.trailing_whitespace
        if violation == ViolationClass.DOS_LINE_ENDING:
            return self.dos_line_endings
        return False


def iter_added_lines(patch: str) -> Iterator[tuple[str, bool]]:
    """Yield ``(line, terminated)`` for every added line of a patch.

    ``terminated`` tells whether the line is followed by a newline; the last
    line of a GitHub patch usually is not.
    """
    lines = patch.split("\n")
    last = len(lines) - 1
    for index, line in enumerate(lines):
        if line.startswith("+") and not line.startswith("+++"):
            yield line[1:], index < last


def scan_patch(patch: str | None) -> DiffScanResult:
    """Scan the added lines of a patch for whitespace violations.

    Args:
    ----
        patch: Unified diff text, ``None`` for binary or rename-only files

    Returns:
    -------
        DiffScanResult with one flag per diff rule

    """
    if not patch:
        return DiffScanResult()

    tabs = trailing_whitespace = dos_line_endings = False
    for line, terminated in iter_added_lines(patch):
        tabs = tabs or "\t" in line
        trailing_whitespace = trailing_whitespace or (terminated and line.endswith(" "))
        dos_line_endings = dos_line_endings or "\r" in line
        if tabs and trailing_whitespace and dos_line_endings:
            break

    return DiffScanResult(
        tabs=tabs,
        trailing_whitespace=trailing_whitespace,
        dos_line_endings=dos_line_endings,
    )


def find_offending_files(
    files: Iterable[FileDiff],
    tab_exclusions: Iterable[str] = (),
) -> dict[ViolationClass, list[str]]:
    """Group the files of a commit by the diff rules they break.

    Args:
    ----
        files: File diffs of a single commit
        tab_exclusions: File names exempt from the tab check

    Returns:
    -------
        Offending file names per diff violation class, in commit order

    """
    excluded = set(tab_exclusions)
    offending: dict[ViolationClass, list[str]] = {violation: [] for violation in DIFF_VIOLATIONS}

    for file_diff in files:
        result = scan_patch(file_diff.patch)
        for violation in DIFF_VIOLATIONS:
            if violation == ViolationClass.TAB_INDENTATION and file_diff.filename in excluded:
                continue
            if result.has(violation):
                offending[violation].append(file_diff.filename)

    return offending
