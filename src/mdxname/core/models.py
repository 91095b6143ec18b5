"""Result models for frontmatter analysis"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


DEFAULT_FILENAME = "untitled.mdx"
MDX_EXTENSION = ".mdx"
MDX_MIME_TYPE = "text/mdx"


class Outcome(str, Enum):
    """Terminal state reached by analyze_content for one input."""
    block_not_found  = "block_not_found"
    syntax_error     = "syntax_error"
    not_a_mapping    = "not_a_mapping"
    field_missing    = "field_missing"
    slug_underivable = "slug_underivable"
    ok               = "ok"
    empty            = "empty"            # blank input; nothing analyzed yet


class ParsingResult(BaseModel):
    """Filename derived from a document plus diagnostics for display."""
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    filename:        str = DEFAULT_FILENAME
    is_valid:        bool = False          # block found and parsed to a mapping
    error:           Optional[str] = None
    canonical_found: Optional[str] = None
    outcome:         Outcome = Field(default=Outcome.empty, exclude=True)

    def to_display(self) -> dict:
        """Return the camelCase record (filename, isValid, error, canonicalFound)."""
        return self.model_dump(by_alias=True)
