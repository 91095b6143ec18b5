"""YAML loading for an extracted frontmatter block"""

from typing import Any

import yaml

from mdxname.errors import FrontmatterShapeError, FrontmatterSyntaxError


def load_frontmatter(block: str) -> dict[str, Any]:
    """Parse block as YAML and return the resulting mapping.

    Raises FrontmatterSyntaxError with the YAML parser's message when the block
    is not valid YAML or holds an impossible date (2023-02-30), and
    FrontmatterShapeError when it is empty or parses to a scalar or list.
    """
    try:
        fm = yaml.safe_load(block)
    except (yaml.YAMLError, ValueError) as e:
        raise FrontmatterSyntaxError(str(e)) from e
    if not isinstance(fm, dict):
        raise FrontmatterShapeError(f"expected a mapping, got {type(fm).__name__}")
    return fm
