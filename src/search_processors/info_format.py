"""
Parser for the line-oriented "info" configuration format.

    ; comment
    # also a comment
    [section]            (accepted, ignored)
    h1 = 5
    title = "quoted value"
    list[] = first       (appended, numbered from 0)
    nested[key] = value

Nested values come back as dicts. Later keys override earlier ones.
Lines that don't match the grammar are skipped, never rejected.
"""

import logging
import re
from typing import Any, Dict, List

logger = logging.getLogger(__name__)

_LINE = re.compile(
    r"""^\s*
    (?P<key>[^=;#\[\]\s][^=;\[\]]*?)
    (?P<subkeys>(?:\[[^=;\[\]]*\])*)
    \s*=\s*
    (?:"(?P<dq>[^"]*)"|'(?P<sq>[^']*)'|(?P<raw>[^\r\n]*?))
    \s*$""",
    re.VERBOSE,
)
_SECTION = re.compile(r'^\s*\[[^\]]*\]\s*$')
_SUBKEY = re.compile(r'\[([^\]]*)\]')


def _assign(target: Dict[Any, Any], keys: List[str], value: str) -> None:
    for i, key in enumerate(keys):
        slot: Any = len(target) if key == '' else key
        if i == len(keys) - 1:
            target[slot] = value
        else:
            if not isinstance(target.get(slot), dict):
                target[slot] = {}
            target = target[slot]


def parse_info_format(text: str) -> Dict[str, Any]:
    """
    Parse info-format text into a dict.

    Args:
        text: Configuration source, one `key = value` per line

    Returns:
        Dict of string values (or nested dicts for bracketed keys)

    Examples:
        >>> parse_info_format("h1 = 5\\n; comment\\nem = '1.5'")
        {'h1': '5', 'em': '1.5'}
        >>> parse_info_format("tags[] = a\\ntags[] = b")
        {'tags': {0: 'a', 1: 'b'}}
    """
    result: Dict[str, Any] = {}
    if not text:
        return result

    for line_no, line in enumerate(text.splitlines(), start=1):
        stripped = line.strip()
        if not stripped or stripped[0] in ';#' or _SECTION.match(line):
            continue
        match = _LINE.match(line)
        if not match:
            logger.debug(f"Skipping unparsable info line {line_no}: {line!r}")
            continue

        value = match.group('dq')
        if value is None:
            value = match.group('sq')
        if value is None:
            value = match.group('raw')

        keys = [match.group('key').strip()] + _SUBKEY.findall(match.group('subkeys'))
        _assign(result, [k.strip() for k in keys], value)

    return result
