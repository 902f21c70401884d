"""
Default value translation for ESDL Auto Generator.

Turns the first argument of a field's ``@default(...)`` into an ESDL
default expression. Defaults that have no ESDL counterpart are dropped
rather than rejected.
"""

import json
import logging
from typing import Mapping, Optional

from esdl_auto_generator.constants import DEFAULT_FUNCTION_MAP, SourceTypes
from esdl_auto_generator.domain.models import EnumAst, NormalizedField
from esdl_auto_generator.domain.source import FunctionCall


logger = logging.getLogger(__name__)


def translate_default(
    field: NormalizedField,
    enums: Mapping[str, EnumAst],
    model_name: str = "",
) -> Optional[str]:
    """
    Get the ESDL default expression for a field.

    Args:
        field: Normalized field, possibly carrying a default attribute
        enums: Enums of the schema, to recognize enum-typed fields
        model_name: Owning model, only used for log messages

    Returns:
        The default expression, or None when nothing should be emitted
    """
    attribute = field.default
    if attribute is None or attribute.value is None:
        return None

    value = attribute.value
    expression: Optional[str] = None

    if isinstance(value, str):
        if field.type_name in enums:
            expression = f"{field.type_name}.{value}"
        elif field.type_name == SourceTypes.STRING:
            expression = quote_string(value)
        elif field.type_name == SourceTypes.BOOLEAN:
            expression = value
    elif isinstance(value, FunctionCall):
        expression = DEFAULT_FUNCTION_MAP.get(value.name)

    if expression is None:
        logger.warning(
            f"Dropping default '{value}' of field '{model_name}.{field.name}': "
            f"no ESDL equivalent for type '{field.declared_type}'"
        )
    return expression


def quote_string(value: str) -> str:
    """Render a string literal, unwrapping it first if it is already quoted."""
    if len(value) >= 2 and value[0] == value[-1] == '"':
        try:
            value = json.loads(value)
        except ValueError:
            value = value[1:-1]
    return json.dumps(value, ensure_ascii=False)
