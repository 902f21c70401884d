"""
Source schema tree as produced by the external Prisma schema parser.

These classes mirror the nodes of the parsed schema (blocks, fields,
attributes and attribute argument values). They are read-only input to the
translator; nothing in the core mutates them.
"""

from dataclasses import dataclass
from typing import Any, Tuple, Union


@dataclass(frozen=True)
class FunctionCall:
    """A call expression, e.g. ``now()`` or ``Unsupported("circle")``."""

    name: str
    params: Tuple[Any, ...] = ()

    def __str__(self) -> str:
        return f"{self.name}({', '.join(str(p) for p in self.params)})"


@dataclass(frozen=True)
class KeyValue:
    """A named attribute argument, e.g. ``fields: [authorId]``."""

    key: str
    value: Any


@dataclass(frozen=True)
class ArrayValue:
    """A bracketed list of values, e.g. ``[authorId]``."""

    args: Tuple[Any, ...] = ()


@dataclass(frozen=True)
class AttributeArgument:
    value: Any


@dataclass(frozen=True)
class FieldAttribute:
    """A field-level attribute such as ``@unique`` or ``@default(now())``."""

    name: str
    args: Tuple[AttributeArgument, ...] = ()


@dataclass(frozen=True)
class BlockAttribute:
    """A model-level attribute such as ``@@id([a, b])``."""

    name: str
    args: Tuple[AttributeArgument, ...] = ()


@dataclass(frozen=True)
class Comment:
    text: str


@dataclass(frozen=True)
class FieldDeclaration:
    """
    A model field.

    ``field_type`` is the bare type name for ordinary fields and a
    FunctionCall for types like ``Unsupported("...")``.
    """

    name: str
    field_type: Union[str, FunctionCall]
    array: bool = False
    optional: bool = False
    attributes: Tuple[FieldAttribute, ...] = ()


@dataclass(frozen=True)
class Enumerator:
    name: str


@dataclass(frozen=True)
class EnumDeclaration:
    name: str
    enumerators: Tuple[Union[Enumerator, Comment], ...] = ()


@dataclass(frozen=True)
class ModelDeclaration:
    name: str
    properties: Tuple[Union[FieldDeclaration, BlockAttribute, Comment], ...] = ()


@dataclass(frozen=True)
class OtherBlock:
    """Any top-level block the translator ignores (datasource, generator, ...)."""

    kind: str
    name: str = ""


Declaration = Union[EnumDeclaration, ModelDeclaration, OtherBlock, Comment]


@dataclass(frozen=True)
class SourceSchema:
    """Ordered top-level declarations of a parsed schema."""

    declarations: Tuple[Declaration, ...] = ()

    @property
    def enums(self) -> Tuple[EnumDeclaration, ...]:
        return tuple(d for d in self.declarations if isinstance(d, EnumDeclaration))

    @property
    def models(self) -> Tuple[ModelDeclaration, ...]:
        return tuple(d for d in self.declarations if isinstance(d, ModelDeclaration))
