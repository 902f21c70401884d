"""
Schema normalization for ESDL Auto Generator.

Re-indexes the parsed declarations into name-keyed mappings and decides,
once, what each field's type and attributes are, so the classifier never
has to probe raw parser nodes.
"""

import logging
from typing import Any, Dict, Optional, Tuple

from esdl_auto_generator.constants import AttributeNames, RelationArguments
from esdl_auto_generator.domain.models import (
    AttributeKind,
    DeclaredType,
    DefaultAttribute,
    FunctionType,
    NamedType,
    NormalizedField,
    NormalizedModel,
    RecognizedAttribute,
    RelationAttribute,
    UniqueAttribute,
)
from esdl_auto_generator.domain.source import (
    ArrayValue,
    FieldAttribute,
    FieldDeclaration,
    FunctionCall,
    KeyValue,
    ModelDeclaration,
    SourceSchema,
)


logger = logging.getLogger(__name__)


def normalize_schema(schema: SourceSchema) -> Dict[str, NormalizedModel]:
    """
    Index every model of the schema by name.

    Args:
        schema: Parsed source schema

    Returns:
        Mapping of model name to normalized model, in declaration order
    """
    models: Dict[str, NormalizedModel] = {}
    for declaration in schema.models:
        models[declaration.name] = normalize_model(declaration)
    logger.debug(f"Normalized {len(models)} models: {', '.join(models)}")
    return models


def normalize_model(declaration: ModelDeclaration) -> NormalizedModel:
    """Index the fields of a single model; block attributes and comments are skipped."""
    model = NormalizedModel(name=declaration.name)
    for prop in declaration.properties:
        if isinstance(prop, FieldDeclaration):
            model.fields[prop.name] = normalize_field(prop)
    return model


def normalize_field(declaration: FieldDeclaration) -> NormalizedField:
    return NormalizedField(
        name=declaration.name,
        declared_type=_declared_type(declaration.field_type),
        array=declaration.array,
        optional=declaration.optional,
        attributes=_index_attributes(declaration.attributes),
    )


def _declared_type(field_type: Any) -> DeclaredType:
    if isinstance(field_type, FunctionCall):
        return FunctionType(name=field_type.name, args=tuple(field_type.params))
    return NamedType(name=str(field_type))


def _index_attributes(attributes: Tuple[FieldAttribute, ...]) -> Dict[AttributeKind, RecognizedAttribute]:
    indexed: Dict[AttributeKind, RecognizedAttribute] = {}
    for attribute in attributes:
        recognized = _recognize_attribute(attribute)
        if recognized is not None:
            indexed[recognized.kind] = recognized
    return indexed


def _recognize_attribute(attribute: FieldAttribute) -> Optional[RecognizedAttribute]:
    if attribute.name == AttributeNames.UNIQUE:
        return UniqueAttribute()
    if attribute.name == AttributeNames.DEFAULT:
        value = attribute.args[0].value if attribute.args else None
        return DefaultAttribute(value=value)
    if attribute.name == AttributeNames.RELATION:
        return _relation_attribute(attribute)
    return None


def _relation_attribute(attribute: FieldAttribute) -> RelationAttribute:
    """
    Build the relation payload from its arguments.

    Accepts ``@relation("Name", fields: [a], references: [b])`` as well as
    the ``name: "Name"`` keyed form.
    """
    name: Optional[str] = None
    fields: Optional[Tuple[str, ...]] = None
    references: Optional[Tuple[str, ...]] = None

    for argument in attribute.args:
        value = argument.value
        if isinstance(value, KeyValue):
            if value.key == RelationArguments.FIELDS:
                fields = _names(value.value)
            elif value.key == RelationArguments.REFERENCES:
                references = _names(value.value)
            elif value.key == RelationArguments.NAME:
                name = _unquote(value.value)
        elif isinstance(value, str) and name is None:
            name = _unquote(value)

    return RelationAttribute(name=name, fields=fields, references=references)


def _names(value: Any) -> Tuple[str, ...]:
    if isinstance(value, ArrayValue):
        return tuple(str(arg) for arg in value.args)
    return (str(value),)


def _unquote(value: Any) -> str:
    text = str(value)
    if len(text) >= 2 and text[0] == text[-1] == '"':
        return text[1:-1]
    return text
