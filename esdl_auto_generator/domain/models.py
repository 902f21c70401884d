"""
Core domain models for ESDL Auto Generator.

Two families of models live here:

- normalized source records, built once from the parsed schema so the
  classifier can answer "which fields of model X point at Y" by key lookup;
- the target schema model (object types, pointers, backlinks, enums) that
  the translator produces and the renderer consumes.
"""

from dataclasses import dataclass, field
from enum import Enum
from itertools import chain
from typing import Any, ClassVar, Dict, List, Optional, Set, Tuple, Union


# =============================================================================
# NORMALIZED SOURCE RECORDS
# =============================================================================

@dataclass(frozen=True)
class NamedType:
    """A field type written as a plain name: a scalar, enum or model."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class FunctionType:
    """A field type written as a call expression, e.g. Unsupported("circle")."""

    name: str
    args: Tuple[Any, ...] = ()

    def __str__(self) -> str:
        return f"{self.name}({', '.join(str(a) for a in self.args)})"


DeclaredType = Union[NamedType, FunctionType]


class AttributeKind(Enum):
    """Field attributes the translator understands."""

    RELATION = "relation"
    DEFAULT = "default"
    UNIQUE = "unique"


@dataclass(frozen=True)
class RelationAttribute:
    """
    Payload of ``@relation(...)``.

    ``fields`` holds the local id field names the relation is stored
    through, or None when the attribute does not name any.
    """

    kind: ClassVar[AttributeKind] = AttributeKind.RELATION

    name: Optional[str] = None
    fields: Optional[Tuple[str, ...]] = None
    references: Optional[Tuple[str, ...]] = None


@dataclass(frozen=True)
class DefaultAttribute:
    """Payload of ``@default(...)``: the first argument value, if any."""

    kind: ClassVar[AttributeKind] = AttributeKind.DEFAULT

    value: Any = None


@dataclass(frozen=True)
class UniqueAttribute:
    kind: ClassVar[AttributeKind] = AttributeKind.UNIQUE


RecognizedAttribute = Union[RelationAttribute, DefaultAttribute, UniqueAttribute]


@dataclass
class NormalizedField:
    """A model field with its attributes indexed by kind."""

    name: str
    declared_type: DeclaredType
    array: bool = False
    optional: bool = False
    attributes: Dict[AttributeKind, RecognizedAttribute] = field(default_factory=dict)

    @property
    def type_name(self) -> Optional[str]:
        """Name of the declared type, or None for function types."""
        if isinstance(self.declared_type, NamedType):
            return self.declared_type.name
        return None

    @property
    def relation(self) -> Optional[RelationAttribute]:
        return self.attributes.get(AttributeKind.RELATION)

    @property
    def default(self) -> Optional[DefaultAttribute]:
        return self.attributes.get(AttributeKind.DEFAULT)

    @property
    def is_unique(self) -> bool:
        return AttributeKind.UNIQUE in self.attributes


@dataclass
class NormalizedModel:
    """A model with its fields indexed by name, in declaration order."""

    name: str
    fields: Dict[str, NormalizedField] = field(default_factory=dict)

    def relation_fields_pointing_at(self, model_name: str) -> List[NormalizedField]:
        """Fields carrying a relation attribute whose type names ``model_name``."""
        return [
            f for f in self.fields.values()
            if f.relation is not None and f.type_name == model_name
        ]


# =============================================================================
# TARGET SCHEMA MODEL
# =============================================================================

class PointerKind(Enum):
    """Kinds of stored pointers on an object type."""

    PROPERTY = "property"
    LINK = "link"


@dataclass
class PointerAst:
    """A stored property or link on an object type."""

    kind: PointerKind
    type: str
    multi: bool = False
    required: bool = False
    exclusive: bool = False
    default: Optional[str] = None

    def __post_init__(self):
        # Lists may always be empty, so a multi pointer is never required.
        if self.multi:
            self.required = False

    @property
    def has_block(self) -> bool:
        """Whether the pointer renders with a ``{ ... }`` sub-block."""
        return self.exclusive or self.default is not None


@dataclass
class BacklinkAst:
    """A computed reverse link, e.g. ``.<author[is Post]``."""

    expr: str
    multi: bool = False


@dataclass
class ObjectTypeAst:
    """An object type with its pointers in declaration order."""

    props: Dict[str, PointerAst] = field(default_factory=dict)
    links: Dict[str, PointerAst] = field(default_factory=dict)
    backlinks: Dict[str, BacklinkAst] = field(default_factory=dict)
    link_ids: Set[str] = field(default_factory=set)

    def stored_pointers(self) -> List[Tuple[str, PointerAst]]:
        """Properties then links, without the id fields implied by a link."""
        return [
            (name, pointer)
            for name, pointer in chain(self.props.items(), self.links.items())
            if name not in self.link_ids
        ]


@dataclass
class EnumAst:
    values: List[str] = field(default_factory=list)


@dataclass
class SchemaAst:
    """The complete translated schema: enum scalars and object types."""

    enums: Dict[str, EnumAst] = field(default_factory=dict)
    types: Dict[str, ObjectTypeAst] = field(default_factory=dict)
