"""Locate the YAML frontmatter block at the head of MDX content"""

import re


# Optional leading whitespace and an optional code fence line (```md, ```markdown, ...),
# then a --- line, the block body (non-greedy), and the first closing ---.
FRONTMATTER_RE = re.compile(r'^\s*(?:```[^\r\n]*[\r\n]+)?\s*---[ \t]*[\r\n]+([\s\S]*?)[\r\n]+---')


def extract_frontmatter(content: str) -> str | None:
    """Return the text between the frontmatter delimiters, or None if there is no block."""
    m = FRONTMATTER_RE.match(content)
    return m.group(1) if m else None
