import argparse
import json
import logging
import sys
from pathlib import Path

from kitsune_styles.adapters.fs.filesystem import default_filesystem
from kitsune_styles.components.bootstrap import BootstrapInput, run_bootstrap
from kitsune_styles.components.merge import deep_merge
from kitsune_styles.components.schema import SchemaProcessor
from kitsune_styles.domain.errors import StyleProcessingError
from kitsune_styles.rules.loader import load_config, resolve_config_path

logger = logging.getLogger("cli")


def handle_process(args: argparse.Namespace) -> int:
    fs = default_filesystem
    try:
        mapping = fs.read_document(Path(args.mapping))
        if args.custom:
            mapping = deep_merge(mapping, fs.read_document(Path(args.custom)))
    except (OSError, ValueError) as e:
        logger.error(f"Cannot read mapping: {e}")
        return 1

    try:
        styles = SchemaProcessor().process(mapping)
    except StyleProcessingError as e:
        logger.error(str(e))
        return 1

    output = json.dumps(styles, indent=2)
    if args.output:
        fs.write_text(Path(args.output), output)
        logger.info(f"Wrote {len(styles)} style entries to {args.output}")
    else:
        print(output)
    return 0


def handle_bootstrap(args: argparse.Namespace) -> int:
    config_path = resolve_config_path(args.config)
    try:
        config = load_config(config_path)
    except (FileNotFoundError, ValueError) as e:
        logger.error(str(e))
        return 1

    logging.getLogger().setLevel(config.log_level)

    result = run_bootstrap(
        BootstrapInput(
            mapping_path=config.mapping_path,
            cache_path=config.cache_path,
            custom_mapping_path=config.custom_mapping_path,
        ),
        fs=default_filesystem,
    )

    if not result.success:
        for error in result.errors:
            location = f" ({error.path})" if error.path else ""
            logger.error(f"{error.code}: {error.message}{location}")
        return 1

    state = "generated" if result.written else "up to date"
    print(f"Styles {state}: {result.entries} entries at {result.cache_path}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Kitsune Styles CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # process
    process_parser = subparsers.add_parser("process", help="Process a mapping into styles")
    process_parser.add_argument("mapping", help="Path to the mapping document (JSON or YAML)")
    process_parser.add_argument("--custom", help="Custom mapping merged over the base mapping")
    process_parser.add_argument("--output", help="Write styles here instead of stdout")

    # bootstrap
    bootstrap_parser = subparsers.add_parser(
        "bootstrap", help="Regenerate the styles cache if the custom mapping changed"
    )
    bootstrap_parser.add_argument("--config", help="Path to kitsune-styles.yaml")

    return parser


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=logging.INFO)
    args = build_parser().parse_args(argv)

    if args.command == "process":
        return handle_process(args)
    return handle_bootstrap(args)


if __name__ == "__main__":
    sys.exit(main())
