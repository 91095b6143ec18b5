"""Export action: write document content under its derived filename"""

import logging
from pathlib import Path

from mdxname.core.models import ParsingResult
from mdxname.errors import ExportError


log = logging.getLogger(__name__)


def describe_status(result: ParsingResult) -> tuple[str, str]:
    """Return (level, message) for the status banner: error, success, or info prompt."""
    if result.error:
        return "error", result.error
    if result.canonical_found:
        return "success", f"Found canonical URL: {result.canonical_found}"
    return "info", "Paste your MDX content with YAML frontmatter to begin."


def export_document(
    content: str,
    filename: str,
    output_dir: Path,
    overwrite: bool = False,
    ) -> Path:
    """Write content (UTF-8) to output_dir / filename and return the written path.

    Only the final path component of filename is used. Raises ExportError for an
    empty filename or when the target exists and overwrite is False.
    """
    name = Path(filename).name
    if not name:
        raise ExportError("Filename must not be empty")
    dest = output_dir / name
    if dest.exists() and not overwrite:
        raise ExportError(f"{dest} already exists (use --overwrite to replace it)")
    output_dir.mkdir(parents=True, exist_ok=True)
    dest.write_text(content, encoding='utf-8')
    log.info("exported %s (%d chars)", dest, len(content))
    return dest
