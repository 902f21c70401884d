"""
Domain module for ESDL Auto Generator.

This module contains the source schema tree, the normalized records and
the target schema model, plus the pure classification logic that maps one
onto the other.
"""

from .source import (
    ArrayValue,
    AttributeArgument,
    BlockAttribute,
    Comment,
    EnumDeclaration,
    Enumerator,
    FieldAttribute,
    FieldDeclaration,
    FunctionCall,
    KeyValue,
    ModelDeclaration,
    OtherBlock,
    SourceSchema,
)

from .models import (
    AttributeKind,
    BacklinkAst,
    DefaultAttribute,
    EnumAst,
    FunctionType,
    NamedType,
    NormalizedField,
    NormalizedModel,
    ObjectTypeAst,
    PointerAst,
    PointerKind,
    RelationAttribute,
    SchemaAst,
    UniqueAttribute,
)

from .normalizer import normalize_schema
from .enums import translate_enums
from .field_mapping import ScalarTypeMapper
from .defaults import translate_default
from .relationships import (
    PairingResolution,
    RelationPairing,
    RelationshipResolver,
)

__all__ = [
    # Source schema
    'ArrayValue',
    'AttributeArgument',
    'BlockAttribute',
    'Comment',
    'EnumDeclaration',
    'Enumerator',
    'FieldAttribute',
    'FieldDeclaration',
    'FunctionCall',
    'KeyValue',
    'ModelDeclaration',
    'OtherBlock',
    'SourceSchema',

    # Normalized records and target model
    'AttributeKind',
    'BacklinkAst',
    'DefaultAttribute',
    'EnumAst',
    'FunctionType',
    'NamedType',
    'NormalizedField',
    'NormalizedModel',
    'ObjectTypeAst',
    'PointerAst',
    'PointerKind',
    'RelationAttribute',
    'SchemaAst',
    'UniqueAttribute',

    # Services
    'normalize_schema',
    'translate_enums',
    'ScalarTypeMapper',
    'translate_default',
    'PairingResolution',
    'RelationPairing',
    'RelationshipResolver',
]
