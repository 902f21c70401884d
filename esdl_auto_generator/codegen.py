import logging
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from esdl_auto_generator.constants import DefaultConfig, SCHEMA_TEMPLATE_NAME
from esdl_auto_generator.domain.models import SchemaAst


logger = logging.getLogger(__name__)

# Define the path to the templates directory relative to this file
TEMPLATE_DIR = Path(__file__).parent / "templates"


def setup_jinja_env() -> Environment:
    """Sets up and returns the Jinja2 environment."""
    env = Environment(
        loader=FileSystemLoader(TEMPLATE_DIR),
        # ESDL uses '<' in enum<...> and backlink paths; never escape it
        autoescape=select_autoescape(["html", "xml"]),
        trim_blocks=True,  # Remove first newline after a block tag
        lstrip_blocks=True,  # Strip leading whitespace from lines with block tags
        keep_trailing_newline=True,
    )
    return env


_JINJA_ENV = setup_jinja_env()


def render(schema: SchemaAst, module_name: str = DefaultConfig.MODULE_NAME) -> str:
    """
    Render the translated schema as ESDL text.

    Enum scalars come first, then object types, each in declaration order
    and separated by a blank line. The schema is assumed to be consistent;
    no checks are made here.
    """
    template = _JINJA_ENV.get_template(SCHEMA_TEMPLATE_NAME)
    rendered = template.render(schema=schema, module_name=module_name)
    logger.debug(
        f"Rendered module '{module_name}' with {len(schema.enums)} enums and {len(schema.types)} types"
    )
    return rendered


def write_schema(rendered: str, output_path: Path) -> None:
    """Writes rendered ESDL to ``output_path``, creating parent directories."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(rendered)
    logger.debug(f"Generated file: {output_path}")
