"""Content matchers for stylesheet and bundler-config detection.

Each matcher wraps the regular expressions for one question asked of a
file's text, so the detection rules can be swapped or tested on their own.
"""

from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class ContentMatcher:
    """Matches text against a pattern, optionally requiring a literal too."""

    pattern: re.Pattern[str]
    requires: str = ""

    def matches(self, content: str | None) -> bool:
        if not content:
            return False
        if self.requires and self.requires not in content:
            return False
        return self.pattern.search(content) is not None

    def search(self, content: str) -> re.Match[str] | None:
        return self.pattern.search(content)


# @import 'tailwindcss' / "tailwindcss/..." with an optional source(...) clause
TAILWIND_IMPORT = ContentMatcher(
    re.compile(r"""@import\s+['"]tailwindcss[^'"]*['"](\s+source\([^)]*\))?""")
)

# Insertion anchor: the full Tailwind import statement
TAILWIND_IMPORT_STATEMENT = ContentMatcher(
    re.compile(r"""@import\s+['"]tailwindcss[^'"]*['"](\s+source\([^)]*\))?;""")
)

# Fallback insertion anchor: any @import statement
ANY_IMPORT_STATEMENT = ContentMatcher(re.compile(r"""@import\s+['"][^'"]+['"];"""))

# vite config importing @tailwindcss/vite and calling tailwindcss()
VITE_PLUGIN = ContentMatcher(re.compile(r"tailwindcss\s*\(\s*\)"), requires="@tailwindcss/vite")

# Bare @source lines written before the managed block existed
LEGACY_SOURCE_LINE = ContentMatcher(
    re.compile(r"""\n@source\s+["'][^"']*packages/[^"']+["'];""")
)
LEGACY_SOURCE_LEADING = ContentMatcher(
    re.compile(r"""\A(?:@source\s+["'][^"']*packages/[^"']+["'];[ \t]*(?:\n|\Z))+""")
)


def managed_block_pattern(start: str, end: str) -> re.Pattern[str]:
    """Non-greedy match of one marker-delimited block."""
    return re.compile(re.escape(start) + r".*?" + re.escape(end), re.DOTALL)


def marker_line_pattern(marker: str) -> re.Pattern[str]:
    """A line holding only the given marker, with its line break."""
    return re.compile(r"^[ \t]*" + re.escape(marker) + r"[ \t]*(?:\n|\Z)", re.MULTILINE)
