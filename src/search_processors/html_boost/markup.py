"""
Markup pre-pass for the HTML boost tokenizer.

Runs on raw field values before any tag is interpreted:
1. Pad tags with spaces so removed tags still separate words
2. Optionally pull `title` attribute values out into the text
3. Optionally turn `<img alt="...">` into `<img>...</img>` so the alt text
   becomes element content
4. Strip tags that are not boost-relevant
"""

import html
import re
from typing import Collection

_TITLE_ATTRIBUTE = re.compile(
    r'(<[-a-z_]+[^>]+)\btitle\s*=\s*("([^"]+)"|\'([^\']+)\')([^>]*>)',
    re.IGNORECASE,
)
_IMG_ALT = re.compile(
    r'<img\b[^>]+\balt\s*=\s*("([^"]+)"|\'([^\']+)\')[^>]*>',
    re.IGNORECASE,
)
_COMMENT = re.compile(r'<!--.*?-->|<![^>]*>|<\?.*?\?>', re.DOTALL)
_ANY_TAG = re.compile(r'</?([a-zA-Z][-:_a-zA-Z0-9]*)([^>]*)>')


def _move_title(match: re.Match) -> str:
    title = match.group(3) or match.group(4)
    return f"{match.group(1)} {match.group(5)} {title} "


def _img_alt_to_content(match: re.Match) -> str:
    alt = match.group(2) or match.group(3)
    return f" <img>{alt}</img> "


def prepare_markup(raw: str, include_title: bool = False, include_alt: bool = True) -> str:
    """
    Apply the word-boundary padding and attribute extraction.

    Attributes the patterns can't match are left in their tag.

    Examples:
        >>> prepare_markup("foo<br>bar")
        'foo <br> bar'
        >>> prepare_markup('<img src="x.png" alt="A cat">')
        '  <img>A cat</img>  '
    """
    text = raw.replace('<', ' <').replace('>', '> ')
    if include_title:
        text = _TITLE_ATTRIBUTE.sub(_move_title, text)
    if include_alt:
        text = _IMG_ALT.sub(_img_alt_to_content, text)
    return text


def strip_tags(text: str, allowed: Collection[str] = (), keep_bare: Collection[str] = ()) -> str:
    """
    Remove tags, comments and processing instructions.

    Args:
        text: Markup to clean
        allowed: Lower-case tag names to keep as-is
        keep_bare: Lower-case tag names kept only when they carry no attributes
            (e.g. the synthetic `<img>` alt wrapper)

    Returns:
        Text with only the allowed tags left. A `<` that doesn't open a
        tag is kept as text.
    """
    def replace(match: re.Match) -> str:
        name = match.group(1).lower()
        if name in allowed:
            return match.group(0)
        if name in keep_bare and not match.group(2).strip():
            return match.group(0)
        return ''

    return _ANY_TAG.sub(replace, _COMMENT.sub('', text))


def strip_markup(raw: str, include_title: bool = False, include_alt: bool = True) -> str:
    """
    Reduce a field value to plain text with entities decoded.

    Used when no element is boosted, so no tags need to survive.

    Examples:
        >>> strip_markup("Fish &amp; <b>chips</b>")
        'Fish &   chips  '
    """
    text = prepare_markup(raw, include_title, include_alt)
    return html.unescape(strip_tags(text))
