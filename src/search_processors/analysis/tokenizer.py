"""
Word tokenizer for processed fulltext values.

Pipeline:
1. Lowercase
2. Extract alphanumeric words (inner hyphens kept)
3. Drop stopwords and pure numbers
4. Snowball stemming ("searching" -> "search")
"""

import re
from typing import List

from nltk.stem.snowball import SnowballStemmer

# Elasticsearch/Lucene default English stopwords
STOPWORDS = frozenset([
    'a', 'an', 'and', 'are', 'as', 'at', 'be', 'but', 'by',
    'for', 'if', 'in', 'into', 'is', 'it',
    'no', 'not', 'of', 'on', 'or', 'such',
    'that', 'the', 'their', 'then', 'there', 'these',
    'they', 'this', 'to', 'was', 'will', 'with'
])

_WORD = re.compile(r'\b[a-z0-9]+(?:-[a-z0-9]+)*\b')
_NUMBER = re.compile(r'^[0-9-]+$')

# Stateless, safe to share
_stemmer = SnowballStemmer('english')


def tokenize_words(text: str, stem: bool = True) -> List[str]:
    """
    Split text into index terms.

    Args:
        text: Plain text (markup already stripped)
        stem: Apply Snowball stemming

    Returns:
        Terms in text order, duplicates kept

    Examples:
        >>> tokenize_words("Searching the HTML filters")
        ['search', 'html', 'filter']
        >>> tokenize_words("PostgreSQL 15.3", stem=False)
        ['postgresql']
    """
    if not text:
        return []
    words = [
        w for w in _WORD.findall(text.lower())
        if w not in STOPWORDS and not _NUMBER.match(w)
    ]
    if stem:
        words = [_stemmer.stem(w) for w in words]
    return words
