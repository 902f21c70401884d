"""
Centralized constants for ESDL Auto Generator.

This module contains the type mappings, default expression mappings and
default configuration values used across the translator.
"""

from typing import Dict


# =============================================================================
# CORE CONFIGURATION
# =============================================================================

class DefaultConfig:
    """Default configuration values."""

    OUTPUT_PATH = "./schema.esdl"
    MODULE_NAME = "default"


# =============================================================================
# SOURCE SCHEMA VOCABULARY
# =============================================================================

class AttributeNames:
    """Field attribute names recognized during normalization."""

    RELATION = "relation"
    DEFAULT = "default"
    UNIQUE = "unique"


class RelationArguments:
    """Keyed arguments of the relation attribute."""

    NAME = "name"
    FIELDS = "fields"
    REFERENCES = "references"


class SourceTypes:
    """Prisma scalar names that get special default handling."""

    STRING = "String"
    BOOLEAN = "Boolean"


# =============================================================================
# TYPE MAPPINGS
# =============================================================================

# Prisma scalar -> ESDL scalar
SCALAR_TYPE_MAP: Dict[str, str] = {
    "String": "str",
    "Boolean": "bool",
    "Int": "int32",
    "BigInt": "int64",
    "Float": "float64",
    "Decimal": "decimal",
    "DateTime": "datetime",
    "Json": "json",
    "Bytes": "bytes",
}

# Prisma default() function -> ESDL default expression
DEFAULT_FUNCTION_MAP: Dict[str, str] = {
    "now": "datetime_current()",
    "uuid": "uuid_generate_v4()",
}


# =============================================================================
# RENDERING
# =============================================================================

SCHEMA_TEMPLATE_NAME = "schema.esdl.j2"
