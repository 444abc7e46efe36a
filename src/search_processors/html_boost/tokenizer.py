"""
Boost-weighted HTML tokenizer.

Splits a field value into text fragments, each scored with the product of
the weights of all configured elements enclosing it:

    <h1>Intro <strong>key</strong></h1> body
      -> ("Intro", 5.0), ("key", 10.0), ("body", 1.0)     (h1=5, strong=2)

Elements with weight 0 hide their text (and their descendants' text) while
still being scanned, so their closing tags are matched correctly.
"""

import html
import logging
import re
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Tuple

from ..config import DEFAULT_MAX_NESTING_DEPTH, MAX_NESTING_DEPTH_LIMIT
from .markup import prepare_markup, strip_markup, strip_tags
from .tag_weights import TagWeightTable

logger = logging.getLogger(__name__)

_TAG = re.compile(r'<(/?)([a-zA-Z][-:_a-zA-Z0-9]*)([^>]*)>')


@dataclass(frozen=True)
class ScoredFragment:
    """Plain text run with its effective boost"""
    text: str
    weight: float


def _emit(fragments: List[ScoredFragment], chunk: str, weight: float) -> None:
    if not weight:
        return
    # Tag padding leaves whitespace runs behind
    text = " ".join(html.unescape(chunk).split())
    if text:
        fragments.append(ScoredFragment(text, weight))


def _scan(
    text: str,
    pos: int,
    table: TagWeightTable,
    active_tag: Optional[str],
    weight: float,
    depth: int,
    max_depth: int,
) -> Tuple[List[ScoredFragment], int, int]:
    """
    Scan one element's content starting at `pos`.

    Returns:
        (fragments, position after the element's closing tag, number of
        opening tags left unscanned because of the depth limit)
    """
    fragments: List[ScoredFragment] = []
    skipped = 0
    # Elements opened past the depth limit, by name, still awaiting their closing tag
    open_skipped: Dict[str, int] = {}

    while True:
        match = _TAG.search(text, pos)
        if match is None:
            break
        _emit(fragments, text[pos:match.start()], weight)
        pos = match.end()
        closing, name = match.group(1), match.group(2).lower()

        if closing:
            if open_skipped.get(name):
                open_skipped[name] -= 1
                continue
            if name == active_tag:
                return fragments, pos, skipped
            # Stray closing tag
            continue
        if match.group(3).rstrip().endswith('/'):
            # Self-closing, no content
            continue
        if depth >= max_depth:
            skipped += 1
            open_skipped[name] = open_skipped.get(name, 0) + 1
            continue

        inner, pos, inner_skipped = _scan(
            text, pos, table, name, weight * table.weight(name), depth + 1, max_depth
        )
        fragments.extend(inner)
        skipped += inner_skipped

    # Unclosed element: runs to end of input
    _emit(fragments, text[pos:], weight)
    return fragments, len(text), skipped


def tokenize(
    raw: str,
    tag_weights: Mapping[str, float],
    include_title: bool = False,
    include_alt: bool = True,
    max_depth: int = DEFAULT_MAX_NESTING_DEPTH,
) -> List[ScoredFragment]:
    """
    Tokenize a field value into boost-weighted text fragments.

    Process:
    1. Pad tags with spaces, extract title/alt attributes (if enabled)
    2. Strip every tag not in `tag_weights`
    3. Recursively scan the remaining tags, multiplying weights

    Never raises for string input; malformed markup degrades to text.

    Args:
        raw: Field value, possibly containing HTML
        tag_weights: Tag name -> weight (TagWeightTable or plain mapping)
        include_title: Index `title` attribute values as text
        include_alt: Index image `alt` text as `<img>` content
        max_depth: Element nesting depth to follow; deeper elements count
            as neutral (weight 1)

    Returns:
        Fragments in document order

    Examples:
        >>> tokenize("<h1><strong>X</strong></h1>", {"h1": 5, "strong": 2})
        [ScoredFragment(text='X', weight=10.0)]

        >>> tokenize("A<b>hidden</b>B", {"b": 0})
        [ScoredFragment(text='A', weight=1.0), ScoredFragment(text='B', weight=1.0)]
    """
    if not raw:
        return []
    max_depth = max(0, min(max_depth, MAX_NESTING_DEPTH_LIMIT))
    table = tag_weights if isinstance(tag_weights, TagWeightTable) else TagWeightTable(tag_weights)

    if not table:
        text = " ".join(strip_markup(raw, include_title, include_alt).split())
        return [ScoredFragment(text, 1.0)] if text else []

    text = prepare_markup(raw, include_title, include_alt)
    keep_bare = ('img',) if include_alt else ()
    text = strip_tags(text, allowed=set(table), keep_bare=keep_bare)

    fragments, _, skipped = _scan(text, 0, table, None, 1.0, 0, max_depth)
    if skipped:
        logger.warning(f"Markup nested deeper than {max_depth} levels, {skipped} element(s) scored as neutral")
    logger.debug(f"Tokenized {len(raw)} chars into {len(fragments)} fragments")
    return fragments
