"""
Processors for a search subsystem's indexing pipeline.

- html_boost: HTML stripping with per-element boosts (the boost tokenizer)
- processors: HtmlFilter and BundleFilter plugins plus their registry
- hookspecs: Extension points of the search subsystem (pluggy)
- pipeline: Runs an index's processors and scores the resulting terms
"""

from .html_boost import ScoredFragment, TagWeightTable, tokenize, validate_tag_weights
from .models import EntityTypeInfo, Index, Item, ProcessorSettings, StaticEntityInfo
from .pipeline import IndexingPipeline
from .processors import BundleFilter, ConfigurationError, HtmlFilter, get_registry

__version__ = "0.1.0"

__all__ = [
    "ScoredFragment",
    "TagWeightTable",
    "tokenize",
    "validate_tag_weights",
    "EntityTypeInfo",
    "Index",
    "Item",
    "ProcessorSettings",
    "StaticEntityInfo",
    "IndexingPipeline",
    "BundleFilter",
    "ConfigurationError",
    "HtmlFilter",
    "get_registry",
]
