"""
Merge processed field values into a term -> score map.

A processed fulltext value is either plain text (every word scores 1.0 per
occurrence) or a list of scored fragments (every word scores its
fragment's weight per occurrence). Scores of repeated terms add up.
"""

import logging
from collections import defaultdict
from typing import Any, Dict

from ..html_boost import ScoredFragment
from .tokenizer import tokenize_words

logger = logging.getLogger(__name__)


def _collect(value: Any, scores: Dict[str, float], stem: bool) -> None:
    if value is None:
        return
    if isinstance(value, ScoredFragment):
        for term in tokenize_words(value.text, stem):
            scores[term] += value.weight
    elif isinstance(value, str):
        for term in tokenize_words(value, stem):
            scores[term] += 1.0
    elif isinstance(value, (list, tuple)):
        # Fragment lists and multi-valued fields
        for element in value:
            _collect(element, scores, stem)
    else:
        _collect(str(value), scores, stem)


def term_scores(value: Any, stem: bool = True) -> Dict[str, float]:
    """
    Score the terms of one processed field value.

    Example:
        >>> term_scores([ScoredFragment("HTML filters", 5.0), ScoredFragment("filter", 1.0)])
        {'html': 5.0, 'filter': 6.0}
    """
    scores: Dict[str, float] = defaultdict(float)
    _collect(value, scores, stem)
    logger.debug(f"Scored {len(scores)} unique terms")
    return dict(scores)
