import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from esdl_auto_generator.codegen import render, write_schema
from esdl_auto_generator.colored_logging import (
    setup_colored_logging,
    get_colored_logger,
    log_success,
    log_progress,
    log_section,
)
from esdl_auto_generator.config_validation import load_config
from esdl_auto_generator.exceptions import ESDLAutoGeneratorError
from esdl_auto_generator.mapper import translate
from esdl_auto_generator.schema_loader import load_source_schema


logger = get_colored_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Translate a parsed Prisma schema into an EdgeDB (ESDL) schema."
    )
    parser.add_argument(
        "-c",
        "--config",
        help="Path to the YAML configuration file.",
    )
    parser.add_argument(
        "-i",
        "--input",
        dest="input_path",
        help="Parsed schema document (JSON or YAML). Overrides config file setting.",
    )
    parser.add_argument(
        "-o",
        "--output",
        dest="output_path",
        help="ESDL file to write. Overrides config file setting.",
    )
    parser.add_argument(
        "-m",
        "--module",
        dest="module_name",
        help="ESDL module name. Overrides config file setting.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose DEBUG logging.",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output (useful for CI/CD environments).",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    # --- Logging Setup ---
    log_level = logging.DEBUG if args.verbose else logging.INFO
    setup_colored_logging(level=log_level, use_colors=not args.no_color)

    if args.verbose:
        logger.debug("Verbose mode enabled. DEBUG level logging activated.")

    # --- Main Execution Pipeline ---
    try:
        # 1. Load Configuration
        log_progress(logger, "Loading configuration...")
        config = load_config(args.config, args)

        # 2. Load the parsed source schema
        log_section(logger, "Schema Translation")
        log_progress(logger, f"Loading schema document {config.input_path}...")
        source_schema = load_source_schema(config.input_path)

        # 3. Translate; nothing is written unless the whole schema translates
        log_progress(logger, "Translating models, relations and enums...")
        schema_ast = translate(source_schema)

        # 4. Render and write
        log_progress(logger, f"Rendering module '{config.module_name}'...")
        output_path = Path(config.output_path)
        write_schema(render(schema_ast, module_name=config.module_name), output_path)
        log_success(logger, f"ESDL schema written to {output_path}")

    # --- Error Handling ---
    except ESDLAutoGeneratorError as e:
        logger.error(f"{type(e).__name__}: {e}", exc_info=args.verbose)
        return 1
    except OSError as e:
        logger.error(f"I/O Error: {e}", exc_info=args.verbose)
        return 1

    return 0


# --- Script Entry Point ---
if __name__ == "__main__":
    sys.exit(main())
