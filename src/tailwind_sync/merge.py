"""Merge a directive list into a stylesheet as a single managed block.

A merged file is viewed as three segments: the text before the block,
the block itself, and the text after it. Only the block is ever
regenerated; prefix and suffix come from the current file.

Cases, in order:
1. A block exists: replace it unless identical, dropping any extra blocks
   or stray marker lines.
2. No block, nothing to write: leave the file alone.
3. No block: drop legacy bare @source lines, then insert the block after
   the tailwindcss import, else after the first @import, else at the top.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from tailwind_sync import END_MARKER, START_MARKER
from tailwind_sync.matchers import (
    ANY_IMPORT_STATEMENT,
    LEGACY_SOURCE_LEADING,
    LEGACY_SOURCE_LINE,
    TAILWIND_IMPORT_STATEMENT,
    managed_block_pattern,
    marker_line_pattern,
)


@dataclass(frozen=True)
class ManagedBlock:
    directives: tuple[str, ...] = ()
    start: str = START_MARKER
    end: str = END_MARKER

    def render(self) -> str:
        return "\n".join([self.start, *self.directives, self.end])


@dataclass(frozen=True)
class ManagedDocument:
    """prefix + block + suffix == file text."""

    prefix: str
    block: str
    suffix: str

    def render(self) -> str:
        return self.prefix + self.block + self.suffix


@dataclass(frozen=True)
class MergeResult:
    content: str
    changed: bool
    document: ManagedDocument | None = None


def parse_document(
    content: str,
    start: str = START_MARKER,
    end: str = END_MARKER,
) -> ManagedDocument | None:
    """Split content around its first managed block, if there is one."""
    match = managed_block_pattern(start, end).search(content)
    if match is None:
        return None
    return ManagedDocument(
        prefix=content[:match.start()],
        block=match.group(0),
        suffix=content[match.end():],
    )


def strip_stray_markers(
    text: str,
    start: str = START_MARKER,
    end: str = END_MARKER,
) -> str:
    """Remove whole managed blocks and lone marker lines from text."""
    text = _drop_blocks(text, start, end)
    for marker in (start, end):
        text = marker_line_pattern(marker).sub("", text)
    return text


def _drop_blocks(text: str, start: str, end: str) -> str:
    pattern = managed_block_pattern(start, end)
    out = []
    pos = 0
    for match in pattern.finditer(text):
        cut = match.start()
        # take the line break in front of the block with it
        if cut > pos and text[cut - 1] == "\n":
            cut -= 1
        out.append(text[pos:cut])
        pos = match.end()
    out.append(text[pos:])
    return "".join(out)


def strip_legacy_directives(content: str) -> str:
    content = LEGACY_SOURCE_LEADING.pattern.sub("", content)
    return LEGACY_SOURCE_LINE.pattern.sub("", content)


def insert_block(content: str, block: str) -> ManagedDocument:
    """Place block after the preferred import line, or at the top."""
    match = TAILWIND_IMPORT_STATEMENT.search(content) or ANY_IMPORT_STATEMENT.search(content)
    if match is None:
        return ManagedDocument(prefix="", block=block, suffix="\n\n" + content)

    line_end = content.find("\n", match.end())
    if line_end == -1:
        return ManagedDocument(prefix=content + "\n\n", block=block, suffix="\n")
    return ManagedDocument(
        prefix=content[:line_end + 1] + "\n",
        block=block,
        suffix="\n" + content[line_end + 1:],
    )


def merge_block(
    content: str | None,
    directives: Sequence[str],
    start: str = START_MARKER,
    end: str = END_MARKER,
) -> MergeResult:
    """Apply directives to a stylesheet's text.

    Args:
        content: Current file text; None is treated as an empty file.
        directives: Rendered, already-sorted @source statements.

    Returns:
        MergeResult with the new text and whether it differs from content.
    """
    content = content or ""
    block = ManagedBlock(tuple(directives), start, end).render()

    existing = parse_document(content, start, end)
    if existing is not None:
        doc = ManagedDocument(
            prefix=strip_stray_markers(existing.prefix, start, end),
            block=block,
            suffix=strip_stray_markers(existing.suffix, start, end),
        )
        if doc == existing:
            return MergeResult(content, False, existing)
        return MergeResult(doc.render(), True, doc)

    if not directives:
        return MergeResult(content, False)

    cleaned = strip_legacy_directives(strip_stray_markers(content, start, end))
    doc = insert_block(cleaned, block)
    return MergeResult(doc.render(), True, doc)
