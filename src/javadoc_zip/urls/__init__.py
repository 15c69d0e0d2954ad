"""URL resolution module.

Exports the pattern tokenizer, the compiled ``UrlTemplate``, and the
``resolve_url`` function.
"""
from __future__ import annotations

from javadoc_zip.urls.pattern import Literal, Placeholder, UrlTemplate, tokenize_pattern
from javadoc_zip.urls.resolver import resolve_url

__all__ = ["Literal", "Placeholder", "UrlTemplate", "resolve_url", "tokenize_pattern"]
