"""Enum translation: enum blocks become ordered ESDL enum scalars."""

import logging
from typing import Dict

from esdl_auto_generator.domain.models import EnumAst
from esdl_auto_generator.domain.source import Enumerator, SourceSchema


logger = logging.getLogger(__name__)


def translate_enums(schema: SourceSchema) -> Dict[str, EnumAst]:
    """
    Collect every enum of the schema, keeping the declared value order.

    Args:
        schema: Parsed source schema

    Returns:
        Mapping of enum name to its values
    """
    enums: Dict[str, EnumAst] = {}
    for declaration in schema.enums:
        values = [item.name for item in declaration.enumerators if isinstance(item, Enumerator)]
        enums[declaration.name] = EnumAst(values=values)
        logger.debug(f"Enum {declaration.name}: {', '.join(values)}")
    return enums
