"""
Loading of parsed schema documents for ESDL Auto Generator.

The Prisma schema text itself is parsed by an external parser
(``prisma-ast``). This module reads that parser's tree, dumped as JSON or
YAML, and converts it into the source schema dataclasses the translator
works on.

Example document::

    {"type": "schema", "list": [
        {"type": "enum", "name": "Role", "enumerators": [
            {"type": "enumerator", "name": "USER"}]},
        {"type": "model", "name": "User", "properties": [
            {"type": "field", "name": "role", "fieldType": "Role",
             "attributes": [{"type": "attribute", "name": "default",
                             "args": [{"type": "attributeArgument", "value": "USER"}]}]}]}
    ]}
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

import yaml

from esdl_auto_generator.domain.source import (
    ArrayValue,
    AttributeArgument,
    BlockAttribute,
    Comment,
    Declaration,
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
from esdl_auto_generator.exceptions import SchemaLoadError


logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".json", ".yaml", ".yml")


def load_source_schema(path: Union[str, Path]) -> SourceSchema:
    """
    Read a parsed schema document from disk.

    JSON is read through the YAML loader, which accepts it as a subset.

    Raises:
        SchemaLoadError: the file is missing, unreadable or malformed
    """
    schema_file = Path(path)
    if schema_file.suffix.lower() not in SUPPORTED_SUFFIXES:
        raise SchemaLoadError(
            f"Unsupported schema document type '{schema_file.suffix}'",
            path=str(schema_file),
            suggestions=[f"Use one of: {', '.join(SUPPORTED_SUFFIXES)}"],
        )
    if not schema_file.is_file():
        raise SchemaLoadError("Schema document not found", path=str(schema_file))

    try:
        with open(schema_file, "r", encoding="utf-8") as f:
            document = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise SchemaLoadError(f"Error parsing schema document: {e}", path=str(schema_file)) from e

    logger.debug(f"Loaded schema document from {schema_file}")
    try:
        return parse_source_document(document)
    except SchemaLoadError as e:
        e.context.setdefault('path', str(schema_file))
        raise


def parse_source_document(document: Any) -> SourceSchema:
    """Convert a ``{"type": "schema", "list": [...]}`` tree into a SourceSchema."""
    if not isinstance(document, dict) or document.get("type") != "schema":
        raise SchemaLoadError("Top-level node must be of type 'schema'", node="schema")

    blocks = document.get("list")
    if not isinstance(blocks, list):
        raise SchemaLoadError("Schema node has no 'list' of declarations", node="schema")

    declarations = tuple(_parse_block(block) for block in blocks)
    logger.debug(f"Parsed {len(declarations)} top-level declarations")
    return SourceSchema(declarations=declarations)


def _parse_block(node: Any) -> Declaration:
    node_type = _node_type(node, "block")
    if node_type == "enum":
        return EnumDeclaration(
            name=_required(node, "name", "enum"),
            enumerators=tuple(_parse_enumerator(item) for item in node.get("enumerators") or []),
        )
    if node_type == "model":
        return ModelDeclaration(
            name=_required(node, "name", "model"),
            properties=tuple(_parse_model_property(item) for item in node.get("properties") or []),
        )
    if node_type == "comment":
        return Comment(text=str(node.get("text", "")))
    return OtherBlock(kind=node_type, name=str(node.get("name", "")))


def _parse_enumerator(node: Any) -> Union[Enumerator, Comment]:
    node_type = _node_type(node, "enumerator")
    if node_type == "enumerator":
        return Enumerator(name=_required(node, "name", "enumerator"))
    return Comment(text=str(node.get("text", "")))


def _parse_model_property(node: Any) -> Union[FieldDeclaration, BlockAttribute, Comment]:
    node_type = _node_type(node, "property")
    if node_type == "field":
        return _parse_field(node)
    if node_type == "attribute":
        return BlockAttribute(name=_required(node, "name", "attribute"), args=_parse_args(node))
    return Comment(text=str(node.get("text", "")))


def _parse_field(node: Dict[str, Any]) -> FieldDeclaration:
    name = _required(node, "name", "field")
    field_type = node.get("fieldType")
    if isinstance(field_type, dict):
        field_type = _parse_value(field_type)
        if not isinstance(field_type, FunctionCall):
            raise SchemaLoadError(f"Unsupported field type node on field '{name}'", node="field")
    elif not isinstance(field_type, str) or not field_type:
        raise SchemaLoadError(f"Field '{name}' has no fieldType", node="field")

    return FieldDeclaration(
        name=name,
        field_type=field_type,
        array=bool(node.get("array", False)),
        optional=bool(node.get("optional", False)),
        attributes=tuple(
            FieldAttribute(name=_required(attr, "name", "attribute"), args=_parse_args(attr))
            for attr in node.get("attributes") or []
        ),
    )


def _parse_args(node: Dict[str, Any]) -> Tuple[AttributeArgument, ...]:
    args: List[AttributeArgument] = []
    for arg in node.get("args") or []:
        if not isinstance(arg, dict) or "value" not in arg:
            raise SchemaLoadError("Attribute argument has no 'value'", node="attributeArgument")
        args.append(AttributeArgument(value=_parse_value(arg["value"])))
    return tuple(args)


def _parse_value(value: Any) -> Any:
    """
    Convert an argument value node.

    Strings are literal tokens; booleans become the ``true``/``false``
    tokens the parser would have produced; numbers stay numeric.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)) or value is None:
        return value
    if isinstance(value, list):
        return ArrayValue(args=tuple(_parse_value(v) for v in value))
    if isinstance(value, dict):
        value_type = value.get("type")
        if value_type == "function":
            return FunctionCall(
                name=_required(value, "name", "function"),
                params=tuple(_parse_value(p) for p in value.get("params") or []),
            )
        if value_type == "keyValue":
            return KeyValue(key=_required(value, "key", "keyValue"), value=_parse_value(value.get("value")))
        if value_type == "array":
            return ArrayValue(args=tuple(_parse_value(v) for v in value.get("args") or []))
    raise SchemaLoadError(f"Unsupported argument value: {value!r}", node="value")


def _node_type(node: Any, expected: str) -> str:
    if not isinstance(node, dict) or not isinstance(node.get("type"), str):
        raise SchemaLoadError(f"Expected a {expected} node with a 'type'", node=expected)
    return node["type"]


def _required(node: Dict[str, Any], key: str, node_name: str) -> str:
    value = node.get(key)
    if not isinstance(value, str) or not value:
        raise SchemaLoadError(f"Node '{node_name}' is missing '{key}'", node=node_name)
    return value
