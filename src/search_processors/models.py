"""
Data handed to processors by the host indexing pipeline.

The host owns storage and lifecycle of indexes and entities; these types
only carry what processors read:
- Index: entity type, field types and per-processor settings
- Item: one entity's field values, keyed by field name
- EntityTypeInfo / EntityInfoProvider: bundle metadata lookup
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol

from pydantic import BaseModel, Field

FULLTEXT = "text"


@dataclass
class EntityTypeInfo:
    """Bundle metadata of one entity type"""
    bundle_key: Optional[str] = None                      # Item field holding the bundle id
    bundles: Dict[str, str] = field(default_factory=dict)  # Bundle id -> label

    @property
    def has_bundles(self) -> bool:
        return bool(self.bundle_key) and bool(self.bundles)


class EntityInfoProvider(Protocol):
    """Entity metadata capability supplied by the host"""

    def get_entity_info(self, entity_type: str) -> Optional[EntityTypeInfo]:
        ...

    def list_bundles(self, entity_type: str) -> List[str]:
        ...


class StaticEntityInfo:
    """EntityInfoProvider backed by a fixed dict (hosts with static types, tests)"""

    def __init__(self, entity_types: Optional[Dict[str, EntityTypeInfo]] = None):
        self.entity_types = dict(entity_types or {})

    def get_entity_info(self, entity_type: str) -> Optional[EntityTypeInfo]:
        return self.entity_types.get(entity_type)

    def list_bundles(self, entity_type: str) -> List[str]:
        info = self.get_entity_info(entity_type)
        return list(info.bundles) if info else []


class ProcessorSettings(BaseModel):
    """Per-index settings of one processor"""
    status: bool = False                      # Enabled on this index
    weight: Optional[int] = None              # Overrides the processor's default order
    settings: Dict[str, Any] = Field(default_factory=dict)


@dataclass
class Index:
    """Search index as seen by processors"""
    id: str
    entity_type: Optional[str] = None
    fields: Dict[str, str] = field(default_factory=dict)   # Field name -> type
    processors: Dict[str, ProcessorSettings] = field(default_factory=dict)
    entity_info: Optional[EntityInfoProvider] = None

    def fulltext_fields(self) -> List[str]:
        return [name for name, field_type in self.fields.items() if field_type == FULLTEXT]

    def get_entity_info(self) -> Optional[EntityTypeInfo]:
        if not self.entity_type or self.entity_info is None:
            return None
        return self.entity_info.get_entity_info(self.entity_type)


@dataclass
class Item:
    """One entity queued for indexing"""
    id: Any
    values: Dict[str, Any] = field(default_factory=dict)

    def get(self, field_name: str, default: Any = None) -> Any:
        return self.values.get(field_name, default)
