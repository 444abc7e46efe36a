"""
Registry that creates processor instances for an index.

Processor definitions are collected through the `search_api_processor_info`
hook, so extensions can add their own processors next to the built-in ones.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

import pluggy

from .. import hookspecs
from ..models import Index, ProcessorSettings
from . import builtin
from .base import BaseProcessor, ProcessorInfo

logger = logging.getLogger(__name__)


def get_plugin_manager(load_entrypoints: bool = True) -> pluggy.PluginManager:
    """
    Plugin manager with the search hook specs and built-in processors.

    Args:
        load_entrypoints: Also register plugins installed under the
            "search_api" entry point group
    """
    pm = pluggy.PluginManager(hookspecs.PROJECT_NAME)
    pm.add_hookspecs(hookspecs)
    pm.register(builtin, name="search_processors.builtin")
    if load_entrypoints:
        loaded = pm.load_setuptools_entrypoints(hookspecs.PROJECT_NAME)
        if loaded:
            logger.info(f"Loaded {loaded} search_api plugin(s) from entry points")
    return pm


class ProcessorRegistry:
    """Collects processor definitions and builds processors for indexes."""

    def __init__(self, plugin_manager: Optional[pluggy.PluginManager] = None):
        self.plugin_manager = plugin_manager or get_plugin_manager()
        self._definitions: Optional[Dict[str, ProcessorInfo]] = None

    @property
    def definitions(self) -> Dict[str, ProcessorInfo]:
        """All known processors, keyed by id (collected once)"""
        if self._definitions is None:
            definitions: Dict[str, ProcessorInfo] = {}
            # pluggy returns results last-registered first; later plugins override earlier ones
            for result in reversed(self.plugin_manager.hook.search_api_processor_info()):
                definitions.update(result or {})
            self.plugin_manager.hook.search_api_processor_info_alter(processor_info=definitions)
            logger.info(f"Registered processors: {sorted(definitions)}")
            self._definitions = definitions
        return self._definitions

    def reset(self):
        """Forget collected definitions (after registering more plugins)."""
        self._definitions = None

    def get_definition(self, processor_id: str) -> ProcessorInfo:
        try:
            return self.definitions[processor_id]
        except KeyError:
            raise ValueError(
                f"Unknown processor: {processor_id}. "
                f"Valid options: {', '.join(sorted(self.definitions))}"
            ) from None

    def create(
        self,
        processor_id: str,
        index: Index,
        options: Optional[Mapping[str, Any]] = None,
    ) -> BaseProcessor:
        """
        Create one processor for `index`.

        Raises:
            ValueError: Unknown processor id
            ConfigurationError: Options rejected by the processor
        """
        definition = self.get_definition(processor_id)
        try:
            return definition.processor_class(index, options)
        except Exception as e:
            logger.error(f"Failed to create processor {processor_id} for index {index.id}: {e}")
            raise

    def create_enabled(self, index: Index) -> List[BaseProcessor]:
        """
        Create the processors enabled on `index`, in execution order.

        Order is ascending weight (the index setting if given, else the
        processor's default); ties keep configuration order. Processors
        that don't support the index are skipped.
        """
        selected = []
        for position, (processor_id, raw_settings) in enumerate(index.processors.items()):
            settings = ProcessorSettings.model_validate(raw_settings)
            if not settings.status:
                continue
            definition = self.get_definition(processor_id)
            if not definition.processor_class.supports_index(index):
                logger.warning(f"Processor {processor_id} does not support index {index.id}, skipping")
                continue
            weight = settings.weight if settings.weight is not None else definition.weight
            selected.append((weight, position, processor_id, settings.settings))

        selected.sort(key=lambda entry: (entry[0], entry[1]))
        return [self.create(processor_id, index, options) for _, _, processor_id, options in selected]


_registry: Optional[ProcessorRegistry] = None


def get_registry(force_reload: bool = False) -> ProcessorRegistry:
    """Shared registry instance (built on first use)."""
    global _registry
    if _registry is None or force_reload:
        _registry = ProcessorRegistry()
    return _registry
