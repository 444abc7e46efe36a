"""
Bundle filter processor.

Excludes items from indexing based on their bundle (content type,
vocabulary, ...). Two modes:
- default=True:  index everything except the selected bundles
- default=False: index only the selected bundles
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..models import Index, Item
from .base import BaseProcessor, ConfigurationError

logger = logging.getLogger(__name__)


class BundleFilterOptions(BaseModel):
    """Options of the bundle filter"""
    model_config = ConfigDict(extra="ignore")

    default: bool = True
    bundles: Optional[List[str]] = None  # None = not configured, filter inactive


class BundleFilter(BaseProcessor):
    """Drops items whose bundle is (or isn't) among the selected ones"""

    ID = "search_api_bundle_filter"
    NAME = "Bundle filter"
    DESCRIPTION = "Exclude items from indexing based on their bundle (content type, vocabulary, ...)."
    WEIGHT = -20

    def __init__(self, index: Index, options: Optional[Mapping[str, Any]] = None):
        super().__init__(index, options)
        errors = self.validate_configuration(self.options)
        if errors:
            raise ConfigurationError(errors)
        self.settings = BundleFilterOptions.model_validate(self.options)

    @classmethod
    def supports_index(cls, index: Index) -> bool:
        """Only indexes of entity types that define bundles"""
        info = index.get_entity_info()
        return info is not None and info.has_bundles

    @classmethod
    def validate_configuration(cls, options: Mapping[str, Any]) -> List[str]:
        try:
            BundleFilterOptions.model_validate(dict(options))
        except ValidationError as e:
            return [
                f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
                for error in e.errors()
            ]
        return []

    def bundle_options(self) -> Dict[str, str]:
        """Selectable bundles (id -> label, label falls back to id)"""
        info = self.index.get_entity_info()
        if info is None or not info.has_bundles:
            return {}
        bundles = self.index.entity_info.list_bundles(self.index.entity_type)
        return {bundle: info.bundles.get(bundle) or bundle for bundle in bundles}

    def preprocess_index_items(self, items: Dict[Any, Item]) -> Dict[Any, Item]:
        info = self.index.get_entity_info()
        if info is None or not info.has_bundles or self.settings.bundles is None:
            return items

        selected = set(self.settings.bundles)
        default = self.settings.default
        kept = {
            item_id: item
            for item_id, item in items.items()
            if (item.get(info.bundle_key) in selected) != default
        }
        if len(kept) != len(items):
            logger.debug(f"Bundle filter on index {self.index.id} dropped {len(items) - len(kept)} of {len(items)} items")
        return kept
