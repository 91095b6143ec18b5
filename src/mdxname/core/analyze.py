"""Frontmatter analysis: block -> YAML mapping -> canonical URL -> filename"""

import logging
from typing import Any

from mdxname.core.extract import extract_frontmatter
from mdxname.core.models import DEFAULT_FILENAME, MDX_EXTENSION, Outcome, ParsingResult
from mdxname.core.parse import load_frontmatter
from mdxname.core.utils.slug import slug_from_url
from mdxname.errors import FrontmatterShapeError, FrontmatterSyntaxError


log = logging.getLogger(__name__)

ERROR_MESSAGES: dict[Outcome, str] = {
    Outcome.block_not_found:  "No Frontmatter found",
    Outcome.syntax_error:     "Syntax Error: {detail}",
    Outcome.not_a_mapping:    "Frontmatter is invalid or empty",
    Outcome.field_missing:    "Key not found",
    Outcome.slug_underivable: "Could not extract slug",
}

# Only a parsed mapping counts as a usable block.
VALID_OUTCOMES = {Outcome.field_missing, Outcome.slug_underivable, Outcome.ok}


def resolve_canonical(fm: dict[str, Any]) -> str | None:
    """Return metadata.canonical if set, else root-level canonical, else None."""
    nested = fm.get('metadata')
    canonical = (nested.get('canonical') if isinstance(nested, dict) else None) or fm.get('canonical')
    if not canonical:
        return None
    return canonical if isinstance(canonical, str) else str(canonical)


def _result(outcome: Outcome, detail: str = "", slug: str | None = None,
            canonical: str | None = None) -> ParsingResult:
    """Shape the ParsingResult for a terminal outcome."""
    message = ERROR_MESSAGES.get(outcome)
    log.debug("frontmatter outcome: %s", outcome.value)
    return ParsingResult(
        filename=f"{slug}{MDX_EXTENSION}" if slug else DEFAULT_FILENAME,
        is_valid=outcome in VALID_OUTCOMES,
        error=message.format(detail=detail) if message else None,
        canonical_found=canonical,
        outcome=outcome,
    )


def analyze_content(content: str) -> ParsingResult:
    """Derive an output filename from the canonical URL in content's frontmatter.

    Never raises for malformed input; every failure is reported through
    ParsingResult.error with the filename left at untitled.mdx.
    """
    block = extract_frontmatter(content)
    if block is None:
        return _result(Outcome.block_not_found)

    try:
        fm = load_frontmatter(block)
    except FrontmatterSyntaxError as e:
        return _result(Outcome.syntax_error, detail=str(e))
    except FrontmatterShapeError:
        return _result(Outcome.not_a_mapping)

    canonical = resolve_canonical(fm)
    if canonical is None:
        return _result(Outcome.field_missing)

    slug = slug_from_url(canonical)
    if slug is None:
        return _result(Outcome.slug_underivable, canonical=canonical)
    return _result(Outcome.ok, slug=slug, canonical=canonical)
