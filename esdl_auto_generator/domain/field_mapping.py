"""
Scalar type mapping for ESDL Auto Generator.

Maps a non-relation field's declared type to the ESDL type its property
is rendered with.
"""

from typing import Dict, Mapping

from esdl_auto_generator.constants import SCALAR_TYPE_MAP
from esdl_auto_generator.domain.models import EnumAst, FunctionType, NormalizedField
from esdl_auto_generator.exceptions import FunctionTypeUnsupportedError, UnknownScalarTypeError


class ScalarTypeMapper:
    """
    Resolves property types against the enums of the schema and a fixed
    Prisma-to-ESDL scalar table.
    """

    def __init__(self, enums: Mapping[str, EnumAst], type_map: Dict[str, str] = None):
        self.enums = enums
        self.type_map = type_map if type_map is not None else SCALAR_TYPE_MAP

    def is_enum(self, field: NormalizedField) -> bool:
        return field.type_name is not None and field.type_name in self.enums

    def map_field(self, model_name: str, field: NormalizedField) -> str:
        """
        Get the ESDL type for a scalar or enum field.

        Raises:
            FunctionTypeUnsupportedError: the type is a call expression
            UnknownScalarTypeError: the type name is not in the table
        """
        if isinstance(field.declared_type, FunctionType):
            raise FunctionTypeUnsupportedError(model_name, field.name, str(field.declared_type))

        if self.is_enum(field):
            return field.type_name

        esdl_type = self.type_map.get(field.type_name)
        if esdl_type is None:
            raise UnknownScalarTypeError(model_name, field.name, field.type_name)
        return esdl_type
