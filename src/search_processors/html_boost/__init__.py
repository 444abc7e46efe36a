"""
HTML stripping with per-element boosting for fulltext fields.

Components:
- tag_weights: Tag -> boost table, parsed and validated from info-format text
- markup: Word-boundary padding, title/alt extraction, tag stripping
- tokenizer: Recursive scan producing (text, weight) fragments

Nested element weights multiply: with h1=5 and strong=2, text in
<h1><strong>...</strong></h1> scores 10. A weight of 0 drops the text.
"""

from .tag_weights import (
    DEFAULT_TAG_WEIGHTS,
    EXCLUDED_TAGS,
    ConfigurationError,
    TagWeightTable,
    validate_tag_weights,
)
from .markup import prepare_markup, strip_markup, strip_tags
from .tokenizer import ScoredFragment, tokenize

__all__ = [
    "DEFAULT_TAG_WEIGHTS",
    "EXCLUDED_TAGS",
    "ConfigurationError",
    "TagWeightTable",
    "validate_tag_weights",
    "prepare_markup",
    "strip_markup",
    "strip_tags",
    "ScoredFragment",
    "tokenize",
]
