"""
HTML filter processor.

Strips HTML from fulltext fields and decodes entities. Text inside
configured elements gets that element's boost; nested boosts multiply and
a boost of 0 removes the element's text from the index.
"""

import logging
from typing import Any, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..config import MAX_NESTING_DEPTH_LIMIT, get_settings
from ..html_boost import (
    DEFAULT_TAG_WEIGHTS,
    ConfigurationError,
    ScoredFragment,
    TagWeightTable,
    strip_markup,
    tokenize,
    validate_tag_weights,
)
from ..models import Index
from .base import BaseProcessor

logger = logging.getLogger(__name__)


class HtmlFilterOptions(BaseModel):
    """Options of the HTML filter"""
    model_config = ConfigDict(extra="ignore")

    title: bool = False                # Index title attributes
    alt: bool = True                   # Index image alt text
    tags: str = DEFAULT_TAG_WEIGHTS    # Info-format tag boosts
    max_depth: int = Field(
        default_factory=lambda: get_settings().max_nesting_depth,
        ge=1,
        le=MAX_NESTING_DEPTH_LIMIT,
    )


class HtmlFilter(BaseProcessor):
    """Strips HTML markup from fulltext fields, boosting configured elements"""

    ID = "search_api_html_filter"
    NAME = "HTML filter"
    DESCRIPTION = (
        "Strips HTML tags from fulltext fields and decodes HTML entities. "
        "Also allows to boost (or ignore) the contents of specific elements."
    )
    WEIGHT = 10

    def __init__(self, index: Index, options: Optional[Mapping[str, Any]] = None):
        super().__init__(index, options)
        errors = self.validate_configuration(self.options)
        if errors:
            logger.error(f"Invalid {self.ID} options on index {index.id}: {errors}")
            raise ConfigurationError(errors)
        self.settings = HtmlFilterOptions.model_validate(self.options)
        self.tags = TagWeightTable.from_config(self.settings.tags)
        logger.info(
            f"HtmlFilter ready on index {index.id}: {len(self.tags)} boosted tags, "
            f"title={self.settings.title}, alt={self.settings.alt}"
        )

    @classmethod
    def validate_configuration(cls, options: Mapping[str, Any]) -> List[str]:
        """Option type errors, or else one message per invalid tag boost."""
        try:
            settings = HtmlFilterOptions.model_validate(dict(options))
        except ValidationError as e:
            return [
                f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
                for error in e.errors()
            ]
        return validate_tag_weights(settings.tags)

    def process_field_value(self, value: Any) -> Union[str, List[ScoredFragment], Any]:
        """
        Strip or tokenize one field value.

        Returns:
            Plain text when no tags are boosted, fragments otherwise.
            Non-string values are returned unchanged.
        """
        if not isinstance(value, str):
            return value
        if not self.tags:
            return strip_markup(value, self.settings.title, self.settings.alt)
        return tokenize(
            value,
            self.tags,
            include_title=self.settings.title,
            include_alt=self.settings.alt,
            max_depth=self.settings.max_depth,
        )
