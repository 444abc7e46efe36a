"""
Tag weight table: boost factor per HTML element.

Weights are read from info-format text, one element per line:

    h1 = 5
    strong = 2
    script = 0      (0 = ignore the element's text content)

Elements not listed have weight 1.0. Nested weights multiply.
"""

import logging
import math
import re
from types import MappingProxyType
from typing import Iterator, List, Mapping, Optional

from ..info_format import parse_info_format

logger = logging.getLogger(__name__)

DEFAULT_TAG_WEIGHTS = (
    "h1 = 5\n"
    "h2 = 3\n"
    "h3 = 2\n"
    "strong = 2\n"
    "b = 2\n"
    "em = 1.5\n"
    "u = 1.5"
)

# Empty elements have no content to boost
EXCLUDED_TAGS = frozenset(['br', 'hr'])

DEFAULT_WEIGHT = 1.0

# Plain decimal literal, optional exponent (no underscores, inf or nan)
_NUMBER = re.compile(r'^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$')


class ConfigurationError(ValueError):
    """Processor options were rejected; `errors` holds every message"""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


def _as_weight(value) -> float:
    """Parse a finite number, raising ValueError otherwise."""
    text = str(value).strip()
    if not _NUMBER.match(text):
        raise ValueError(f"not a number: {value!r}")
    weight = float(text)
    if not math.isfinite(weight):
        raise ValueError(f"not a finite number: {value!r}")
    return weight


def validate_tag_weights(source: str) -> List[str]:
    """
    Check every entry of a tag weight source.

    Collects one message per offending tag instead of stopping at the first.

    Args:
        source: Info-format text

    Returns:
        Error messages, empty if the source is valid

    Examples:
        >>> validate_tag_weights("h1 = abc\\nh2 = -1\\nh3 = 2")
        ['Boost value for tag <h1> must be numeric.', 'Boost value for tag <h2> must be non-negative.']
    """
    if not source:
        return []

    errors = []
    for tag, value in parse_info_format(source).items():
        if isinstance(value, dict):
            errors.append(f"Boost value for tag <{tag}> can't be an array.")
            continue
        try:
            weight = _as_weight(value)
        except ValueError:
            errors.append(f"Boost value for tag <{tag}> must be numeric.")
            continue
        if weight < 0:
            errors.append(f"Boost value for tag <{tag}> must be non-negative.")
    return errors


class TagWeightTable(Mapping):
    """
    Immutable mapping of lower-cased tag name to boost weight.

    Use `weight()` for lookups that should fall back to the neutral default.
    """

    def __init__(self, weights: Optional[Mapping[str, float]] = None):
        cleaned = {}
        for tag, weight in (weights or {}).items():
            name = tag.strip().lower()
            if name in EXCLUDED_TAGS:
                continue
            cleaned[name] = float(weight)
        self._weights = MappingProxyType(cleaned)

    @classmethod
    def from_config(cls, source: str) -> "TagWeightTable":
        """
        Build a table from info-format text.

        Raises:
            ConfigurationError: with all messages if any entry is invalid
        """
        errors = validate_tag_weights(source)
        if errors:
            logger.warning(f"Rejected tag weight configuration: {errors}")
            raise ConfigurationError(errors)
        parsed = parse_info_format(source)
        table = cls({tag: _as_weight(value) for tag, value in parsed.items()})
        logger.debug(f"Loaded tag weights: {dict(table)}")
        return table

    def weight(self, tag: str) -> float:
        return self._weights.get(tag.lower(), DEFAULT_WEIGHT)

    def __getitem__(self, tag: str) -> float:
        return self._weights[tag.lower()]

    def __contains__(self, tag) -> bool:
        return isinstance(tag, str) and tag.lower() in self._weights

    def __iter__(self) -> Iterator[str]:
        return iter(self._weights)

    def __len__(self) -> int:
        return len(self._weights)

    def __repr__(self) -> str:
        return f"TagWeightTable({dict(self._weights)!r})"
