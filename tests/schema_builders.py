"""
Helpers for building parsed source schemas in tests.

They read close to the Prisma text they stand for, e.g.
``field("author", "User", relation(fields=["authorId"], references=["id"]))``
for ``author User @relation(fields: [authorId], references: [id])``.
"""

from typing import Any, Iterable, Optional

from esdl_auto_generator.domain.source import (
    ArrayValue,
    AttributeArgument,
    EnumDeclaration,
    Enumerator,
    FieldAttribute,
    FieldDeclaration,
    FunctionCall,
    KeyValue,
    ModelDeclaration,
    SourceSchema,
)


def attr(name: str, *values: Any) -> FieldAttribute:
    return FieldAttribute(name=name, args=tuple(AttributeArgument(value=v) for v in values))


def unique() -> FieldAttribute:
    return attr("unique")


def default(value: Any) -> FieldAttribute:
    return attr("default", value)


def call(name: str, *params: Any) -> FunctionCall:
    return FunctionCall(name=name, params=tuple(params))


def relation(
    fields: Optional[Iterable[str]] = None,
    references: Optional[Iterable[str]] = None,
    name: Optional[str] = None,
) -> FieldAttribute:
    values = []
    if name is not None:
        values.append(f'"{name}"')
    if fields is not None:
        values.append(KeyValue(key="fields", value=ArrayValue(args=tuple(fields))))
    if references is not None:
        values.append(KeyValue(key="references", value=ArrayValue(args=tuple(references))))
    return attr("relation", *values)


def field(name: str, field_type: Any, *attributes: FieldAttribute, array=False, optional=False) -> FieldDeclaration:
    return FieldDeclaration(
        name=name,
        field_type=field_type,
        array=array,
        optional=optional,
        attributes=tuple(attributes),
    )


def model(name: str, *fields: Any) -> ModelDeclaration:
    return ModelDeclaration(name=name, properties=tuple(fields))


def enum(name: str, *values: str) -> EnumDeclaration:
    return EnumDeclaration(name=name, enumerators=tuple(Enumerator(name=v) for v in values))


def schema(*declarations: Any) -> SourceSchema:
    return SourceSchema(declarations=tuple(declarations))


def blog_schema() -> SourceSchema:
    """
    enum Role { USER ADMIN }

    model User {
      id        String   @id @default(uuid())
      email     String   @unique
      role      Role     @default(USER)
      createdAt DateTime @default(now())
      posts     Post[]
    }

    model Post {
      id        Int     @id @default(autoincrement())
      title     String
      published Boolean @default(false)
      author    User    @relation(fields: [authorId], references: [id])
      authorId  String
    }
    """
    return schema(
        enum("Role", "USER", "ADMIN"),
        model(
            "User",
            field("id", "String", attr("id"), default(call("uuid"))),
            field("email", "String", unique()),
            field("role", "Role", default("USER")),
            field("createdAt", "DateTime", default(call("now"))),
            field("posts", "Post", array=True),
        ),
        model(
            "Post",
            field("id", "Int", attr("id"), default(call("autoincrement"))),
            field("title", "String"),
            field("published", "Boolean", default("false")),
            field("author", "User", relation(fields=["authorId"], references=["id"])),
            field("authorId", "String"),
        ),
    )


BLOG_ESDL = """\
module default {
  scalar type Role extending enum<USER, ADMIN>;

  type User {
    required property id -> str {
      default := uuid_generate_v4();
    };
    required property email -> str {
      constraint exclusive;
    };
    required property role -> Role {
      default := Role.USER;
    };
    required property createdAt -> datetime {
      default := datetime_current();
    };
    multi link posts := .<author[is Post];
  }

  type Post {
    required property id -> int32;
    required property title -> str;
    required property published -> bool {
      default := false;
    };
    required link author -> User;
  }
}
"""
