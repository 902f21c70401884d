"""
Schema translation for ESDL Auto Generator.

This module turns a parsed Prisma-style schema into the ESDL schema model:
every field of every model becomes a property, a stored link or a computed
backlink, with its multiplicity, exclusivity and default resolved.

Translation is all-or-nothing. The first field that cannot be translated
raises, and no partial schema is returned.

Example:
    >>> from esdl_auto_generator.mapper import translate
    >>> schema_ast = translate(source_schema)
    >>> schema_ast.types["User"].props["email"].exclusive
    True
"""

import logging
from typing import Mapping

from esdl_auto_generator.domain.defaults import translate_default
from esdl_auto_generator.domain.enums import translate_enums
from esdl_auto_generator.domain.field_mapping import ScalarTypeMapper
from esdl_auto_generator.domain.models import (
    EnumAst,
    NormalizedField,
    NormalizedModel,
    ObjectTypeAst,
    PointerAst,
    PointerKind,
    SchemaAst,
)
from esdl_auto_generator.domain.normalizer import normalize_schema
from esdl_auto_generator.domain.relationships import PairingResolution, RelationshipResolver
from esdl_auto_generator.domain.source import SourceSchema
from esdl_auto_generator.exceptions import AmbiguousBacklinkError


logger = logging.getLogger(__name__)


def translate(source_schema: SourceSchema) -> SchemaAst:
    """
    Translate a parsed source schema into the ESDL schema model.

    Args:
        source_schema: Parsed schema declarations

    Returns:
        The translated schema, ready for rendering

    Raises:
        MissingRelationTargetError, AmbiguousBacklinkError,
        UnsupportedCompositeKeyError, UnknownScalarTypeError,
        FunctionTypeUnsupportedError
    """
    models = normalize_schema(source_schema)
    enums = translate_enums(source_schema)

    resolver = RelationshipResolver(models)
    type_mapper = ScalarTypeMapper(enums)

    schema_ast = SchemaAst(enums=enums)
    for model in models.values():
        schema_ast.types[model.name] = translate_model(model, resolver, type_mapper, enums)

    logger.info(
        f"Translated {len(schema_ast.enums)} enums and {len(schema_ast.types)} object types."
    )
    return schema_ast


def translate_model(
    model: NormalizedModel,
    resolver: RelationshipResolver,
    type_mapper: ScalarTypeMapper,
    enums: Mapping[str, EnumAst],
) -> ObjectTypeAst:
    """Classify every field of one model, in declaration order."""
    object_type = ObjectTypeAst()

    for field in model.fields.values():
        resolver.check_relation_target(model, field)

        if not resolver.is_link(field):
            object_type.props[field.name] = _build_pointer(
                PointerKind.PROPERTY, type_mapper.map_field(model.name, field), model, field, enums
            )
            continue

        pairing = resolver.resolve_pairing(model, field)

        if pairing.resolution == PairingResolution.AMBIGUOUS:
            raise AmbiguousBacklinkError(
                model.name,
                field.name,
                pairing.target_model,
                [candidate.name for candidate in pairing.candidates],
            )

        if pairing.resolution == PairingResolution.BACKLINK:
            object_type.backlinks[field.name] = resolver.build_backlink(pairing, field)
            logger.debug(
                f"{model.name}.{field.name}: backlink through "
                f"{pairing.target_model}.{pairing.inverse_field.name}"
            )
            continue

        link_id = resolver.link_id_field(model, field)
        if link_id is not None:
            object_type.link_ids.add(link_id)
            if link_id not in model.fields:
                logger.warning(
                    f"Relation '{model.name}.{field.name}' names id field '{link_id}' "
                    f"which is not declared on '{model.name}'"
                )

        object_type.links[field.name] = _build_pointer(
            PointerKind.LINK, pairing.target_model, model, field, enums
        )
        logger.debug(f"{model.name}.{field.name}: link -> {pairing.target_model}")

    return object_type


def _build_pointer(
    kind: PointerKind,
    esdl_type: str,
    model: NormalizedModel,
    field: NormalizedField,
    enums: Mapping[str, EnumAst],
) -> PointerAst:
    return PointerAst(
        kind=kind,
        type=esdl_type,
        multi=field.array,
        required=not field.array and not field.optional,
        exclusive=field.is_unique,
        default=translate_default(field, enums, model.name),
    )

