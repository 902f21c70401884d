"""
ESDL Auto Generator: translate parsed Prisma schemas into EdgeDB schemas.

The core is two pure operations:

- ``translate(source_schema) -> SchemaAst``
- ``render(schema_ast) -> str``
"""

from .codegen import render
from .mapper import translate

__all__ = ['render', 'translate']
