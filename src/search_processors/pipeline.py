"""
Index-time pipeline: runs an index's processors over items and turns the
processed fulltext values into boost-weighted term scores.

Stands in for the host's indexing step, which calls processors the same
way before writing to its backend.
"""

import logging
from typing import Any, Dict, List, Optional

from .analysis import term_scores
from .models import Index, Item
from .processors import BaseProcessor, ProcessorRegistry, get_registry

logger = logging.getLogger(__name__)


class IndexingPipeline:
    """Processor chain of one index"""

    def __init__(self, index: Index, registry: Optional[ProcessorRegistry] = None, stem: bool = True):
        self.index = index
        self.registry = registry or get_registry()
        self.stem = stem
        self.processors: List[BaseProcessor] = self.registry.create_enabled(index)
        logger.info(f"Pipeline for index {index.id}: {[type(p).__name__ for p in self.processors]}")

    def preprocess_items(self, items: Dict[Any, Item]) -> Dict[Any, Item]:
        """
        Run every enabled processor, in weight order.

        Args:
            items: Items keyed by id; field values may be replaced in place

        Returns:
            Items that should be indexed
        """
        for processor in self.processors:
            items = processor.preprocess_index_items(items)
        return items

    def index_terms(self, items: Dict[Any, Item]) -> Dict[Any, Dict[str, Dict[str, float]]]:
        """
        Process items and score the terms of their fulltext fields.

        Returns:
            {item_id: {field_name: {term: score}}}
        """
        processed = self.preprocess_items(items)
        fields = self.index.fulltext_fields()
        result = {
            item_id: {name: term_scores(item.get(name), self.stem) for name in fields}
            for item_id, item in processed.items()
        }
        logger.debug(f"Index {self.index.id}: scored {len(result)} of {len(items)} items")
        return result
