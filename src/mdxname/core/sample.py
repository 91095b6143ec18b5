"""Sample MDX document with a nested canonical URL"""

SAMPLE_DOCUMENT = """\
---
title: "The Best Stain Resistant Couches"
date: "2023-10-27"
metadata:
  canonical: https://www.example.com/best-stain-resistant-couch
  author: "Jane Doe"
---

# Your MDX Content Here

Paste your article content here. The filename will be automatically generated from the canonical URL above.
"""
