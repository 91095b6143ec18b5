"""Exception hierarchy for frontmatter parsing, export, and configuration"""


class MdxnameError(Exception):
    """Base exception for all mdxname errors."""


class FrontmatterError(MdxnameError, ValueError):
    """Raised when a frontmatter block cannot be turned into a mapping."""


class FrontmatterSyntaxError(FrontmatterError):
    """Raised when the frontmatter block is not valid YAML."""


class FrontmatterShapeError(FrontmatterError):
    """Raised when the frontmatter block parses to something other than a mapping."""


class ExportError(MdxnameError):
    """Raised when a document cannot be written to the output directory."""


class ConfigError(MdxnameError, ValueError):
    """Raised when config.yaml is invalid."""
