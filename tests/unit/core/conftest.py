"""Shared fixtures for core unit tests"""

import pytest


NESTED_MD = """\
---
title: "The Best Stain Resistant Couches"
metadata:
  canonical: https://www.example.com/best-stain-resistant-couch
---
# Body
"""

ROOT_MD = """\
---
title: Root level
canonical: https://www.example.com/blog/root-post/
---

Body.
"""

FENCED_MD = "```md\n---\ncanonical: /x/y/z\n---\n```"


@pytest.fixture(name="nested_md")
def nested_md_fixture():
    return NESTED_MD


@pytest.fixture(name="root_md")
def root_md_fixture():
    return ROOT_MD


@pytest.fixture(name="fenced_md")
def fenced_md_fixture():
    return FENCED_MD
