"""
Term analysis for processed fulltext values.

Components:
- tokenizer: Word extraction with stopword removal and Snowball stemming
- term_scores: Boost-weighted term aggregation over processed values
"""

from .tokenizer import STOPWORDS, tokenize_words
from .term_scores import term_scores

__all__ = [
    "STOPWORDS",
    "tokenize_words",
    "term_scores",
]
