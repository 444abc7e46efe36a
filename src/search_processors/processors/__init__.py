"""
Index-time processors.

Usage:
    # Processors enabled on an index, in execution order:
    from search_processors.processors import get_registry

    processors = get_registry().create_enabled(index)
    for processor in processors:
        items = processor.preprocess_index_items(items)

    # Or create a specific processor:
    from search_processors.processors import HtmlFilter

    html_filter = HtmlFilter(index, {"tags": "h1 = 5\\nb = 0", "title": True})
    fragments = html_filter.process_field_value("<h1>Title</h1> body")
"""

from .base import BaseProcessor, ConfigurationError, ProcessorInfo
from .bundle_filter import BundleFilter, BundleFilterOptions
from .html_filter import HtmlFilter, HtmlFilterOptions
from .factory import ProcessorRegistry, get_plugin_manager, get_registry

__all__ = [
    'BaseProcessor',
    'ConfigurationError',
    'ProcessorInfo',
    'BundleFilter',
    'BundleFilterOptions',
    'HtmlFilter',
    'HtmlFilterOptions',
    'ProcessorRegistry',
    'get_plugin_manager',
    'get_registry',
]
