"""
Abstract base class for index-time processors.

All processors implement this interface so the pipeline can run them in
weight order without knowing what they do.
"""

import logging
from abc import ABC
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Type

from ..html_boost import ConfigurationError
from ..models import Index, Item

logger = logging.getLogger(__name__)

__all__ = ["BaseProcessor", "ConfigurationError", "ProcessorInfo"]


@dataclass
class ProcessorInfo:
    """Processor definition as announced through search_api_processor_info"""
    id: str
    name: str
    processor_class: Type["BaseProcessor"]
    description: str = ""
    weight: int = 0  # Lower runs first


class BaseProcessor(ABC):
    """
    Base class for processors.

    Subclasses either override `process_field_value()` to transform every
    fulltext field value, or `preprocess_index_items()` to act on whole items
    (e.g. to drop them).
    """

    def __init__(self, index: Index, options: Optional[Mapping[str, Any]] = None):
        self.index = index
        self.options: Dict[str, Any] = dict(options or {})

    @classmethod
    def supports_index(cls, index: Index) -> bool:
        """Whether the processor can be enabled on `index` (default: any index)"""
        return True

    @classmethod
    def validate_configuration(cls, options: Mapping[str, Any]) -> List[str]:
        """
        Check submitted options.

        Returns:
            Error messages, all of them, empty when options are valid
        """
        return []

    def preprocess_index_items(self, items: Dict[Any, Item]) -> Dict[Any, Item]:
        """
        Process items before they are indexed.

        Default: run `process_field_value()` on every fulltext field value,
        element-wise for multi-valued fields. Values are replaced in place.

        Args:
            items: Items keyed by id

        Returns:
            Items to index, keyed by id
        """
        fields = self.index.fulltext_fields()
        for item in items.values():
            for name in fields:
                value = item.values.get(name)
                if value is None:
                    continue
                if isinstance(value, list):
                    item.values[name] = [self.process_field_value(v) for v in value]
                else:
                    item.values[name] = self.process_field_value(value)
        return items

    def process_field_value(self, value: Any) -> Any:
        """Transform a single fulltext field value (default: unchanged)"""
        return value

    def __repr__(self) -> str:
        return f"{type(self).__name__}(index={self.index.id!r})"
