# File: tests/conftest.py
# Shared pytest fixtures for the translator tests.

import json
import logging
from pathlib import Path

import pytest

from esdl_auto_generator.colored_logging import ColoredFormatter
from schema_builders import blog_schema


BLOG_DOCUMENT = {
    "type": "schema",
    "list": [
        {"type": "datasource", "name": "db", "assignments": []},
        {
            "type": "enum",
            "name": "Role",
            "enumerators": [
                {"type": "enumerator", "name": "USER"},
                {"type": "comment", "text": "// administrators"},
                {"type": "enumerator", "name": "ADMIN"},
            ],
        },
        {
            "type": "model",
            "name": "User",
            "properties": [
                {
                    "type": "field",
                    "name": "id",
                    "fieldType": "String",
                    "attributes": [
                        {"type": "attribute", "kind": "field", "name": "id"},
                        {
                            "type": "attribute",
                            "kind": "field",
                            "name": "default",
                            "args": [{"type": "attributeArgument", "value": {"type": "function", "name": "uuid", "params": []}}],
                        },
                    ],
                },
                {
                    "type": "field",
                    "name": "email",
                    "fieldType": "String",
                    "attributes": [{"type": "attribute", "kind": "field", "name": "unique"}],
                },
                {
                    "type": "field",
                    "name": "role",
                    "fieldType": "Role",
                    "attributes": [
                        {
                            "type": "attribute",
                            "kind": "field",
                            "name": "default",
                            "args": [{"type": "attributeArgument", "value": "USER"}],
                        }
                    ],
                },
                {
                    "type": "field",
                    "name": "createdAt",
                    "fieldType": "DateTime",
                    "attributes": [
                        {
                            "type": "attribute",
                            "kind": "field",
                            "name": "default",
                            "args": [{"type": "attributeArgument", "value": {"type": "function", "name": "now", "params": []}}],
                        }
                    ],
                },
                {"type": "field", "name": "posts", "fieldType": "Post", "array": True},
            ],
        },
        {
            "type": "model",
            "name": "Post",
            "properties": [
                {
                    "type": "field",
                    "name": "id",
                    "fieldType": "Int",
                    "attributes": [
                        {"type": "attribute", "kind": "field", "name": "id"},
                        {
                            "type": "attribute",
                            "kind": "field",
                            "name": "default",
                            "args": [{"type": "attributeArgument", "value": {"type": "function", "name": "autoincrement", "params": []}}],
                        },
                    ],
                },
                {"type": "field", "name": "title", "fieldType": "String"},
                {
                    "type": "field",
                    "name": "published",
                    "fieldType": "Boolean",
                    "attributes": [
                        {
                            "type": "attribute",
                            "kind": "field",
                            "name": "default",
                            "args": [{"type": "attributeArgument", "value": False}],
                        }
                    ],
                },
                {
                    "type": "field",
                    "name": "author",
                    "fieldType": "User",
                    "attributes": [
                        {
                            "type": "attribute",
                            "kind": "field",
                            "name": "relation",
                            "args": [
                                {"type": "attributeArgument", "value": {"type": "keyValue", "key": "fields", "value": {"type": "array", "args": ["authorId"]}}},
                                {"type": "attributeArgument", "value": {"type": "keyValue", "key": "references", "value": {"type": "array", "args": ["id"]}}},
                            ],
                        }
                    ],
                },
                {"type": "field", "name": "authorId", "fieldType": "String"},
                {"type": "attribute", "kind": "object", "name": "index", "args": [{"type": "attributeArgument", "value": {"type": "array", "args": ["authorId"]}}]},
            ],
        },
    ],
}


@pytest.fixture
def blog_source_schema():
    return blog_schema()


@pytest.fixture
def blog_document():
    return json.loads(json.dumps(BLOG_DOCUMENT))


@pytest.fixture
def blog_document_path(tmp_path: Path, blog_document) -> Path:
    """The blog schema tree dumped to a JSON file."""
    path = tmp_path / "schema.json"
    path.write_text(json.dumps(blog_document, indent=2), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def reset_colored_logging():
    """Drop the console handler the CLI installs on the root logger."""
    yield
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        if isinstance(handler.formatter, ColoredFormatter):
            root_logger.removeHandler(handler)
    root_logger.setLevel(logging.WARNING)
