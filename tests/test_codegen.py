"""
Tests for ESDL rendering.
"""

from unittest import TestCase

from esdl_auto_generator.codegen import render, write_schema
from esdl_auto_generator.domain.models import (
    BacklinkAst,
    EnumAst,
    ObjectTypeAst,
    PointerAst,
    PointerKind,
    SchemaAst,
)
from esdl_auto_generator.mapper import translate

from schema_builders import BLOG_ESDL, blog_schema


def _type(**kwargs) -> SchemaAst:
    return SchemaAst(types={"Thing": ObjectTypeAst(**kwargs)})


class TestRender(TestCase):
    """Test cases for render"""

    def test_blog_schema(self):
        self.assertEqual(render(translate(blog_schema())), BLOG_ESDL)

    def test_empty_schema(self):
        self.assertEqual(render(SchemaAst()), "module default {\n}\n")

    def test_module_name(self):
        self.assertTrue(render(SchemaAst(), module_name="blog").startswith("module blog {\n"))

    def test_enums_are_separated_by_blank_lines(self):
        schema_ast = SchemaAst(
            enums={"Role": EnumAst(["USER", "ADMIN"]), "Color": EnumAst(["RED"])}
        )

        self.assertEqual(
            render(schema_ast),
            "module default {\n"
            "  scalar type Role extending enum<USER, ADMIN>;\n"
            "\n"
            "  scalar type Color extending enum<RED>;\n"
            "}\n",
        )

    def test_plain_pointers(self):
        schema_ast = _type(
            props={
                "name": PointerAst(kind=PointerKind.PROPERTY, type="str", required=True),
                "nickname": PointerAst(kind=PointerKind.PROPERTY, type="str"),
                "tags": PointerAst(kind=PointerKind.PROPERTY, type="str", multi=True),
            },
            links={"owner": PointerAst(kind=PointerKind.LINK, type="User", required=True)},
        )

        self.assertEqual(
            render(schema_ast),
            "module default {\n"
            "  type Thing {\n"
            "    required property name -> str;\n"
            "    property nickname -> str;\n"
            "    multi property tags -> str;\n"
            "    required link owner -> User;\n"
            "  }\n"
            "}\n",
        )

    def test_exclusive_and_default_sub_block(self):
        schema_ast = _type(
            props={
                "code": PointerAst(
                    kind=PointerKind.PROPERTY, type="str", required=True, exclusive=True, default='"x"'
                )
            }
        )

        self.assertIn(
            "    required property code -> str {\n"
            "      constraint exclusive;\n"
            "      default := \"x\";\n"
            "    };\n",
            render(schema_ast),
        )

    def test_link_ids_are_not_rendered(self):
        schema_ast = _type(
            props={"ownerId": PointerAst(kind=PointerKind.PROPERTY, type="str", required=True)},
            links={"owner": PointerAst(kind=PointerKind.LINK, type="User", required=True)},
            link_ids={"ownerId"},
        )

        rendered = render(schema_ast)

        self.assertNotIn("ownerId", rendered)
        self.assertIn("required link owner -> User;", rendered)

    def test_backlinks_follow_stored_pointers(self):
        schema_ast = _type(
            links={"owner": PointerAst(kind=PointerKind.LINK, type="User")},
            backlinks={
                "comments": BacklinkAst(expr=".<thing[is Comment]", multi=True),
                "cover": BacklinkAst(expr=".<thing[is Image]"),
            },
        )

        self.assertEqual(
            render(schema_ast),
            "module default {\n"
            "  type Thing {\n"
            "    link owner -> User;\n"
            "    multi link comments := .<thing[is Comment];\n"
            "    link cover := .<thing[is Image];\n"
            "  }\n"
            "}\n",
        )

    def test_multi_pointer_is_never_rendered_required(self):
        pointer = PointerAst(kind=PointerKind.LINK, type="Tag", multi=True, required=True)

        self.assertIn("    multi link tags -> Tag;\n", render(_type(links={"tags": pointer})))

    def test_render_is_deterministic(self):
        schema_ast = translate(blog_schema())

        self.assertEqual(render(schema_ast), render(schema_ast))


def test_write_schema_creates_parent_directories(tmp_path):
    output_path = tmp_path / "dbschema" / "default.esdl"

    write_schema(BLOG_ESDL, output_path)

    assert output_path.read_text(encoding="utf-8") == BLOG_ESDL
