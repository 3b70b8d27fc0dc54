"""Bootstrap component implementation.

Generates styles for a base mapping merged with an optional custom mapping
and stores them in a ``{checksum, styles}`` cache file. The checksum covers
the custom mapping text only, since the base mapping ships with the package
and does not change between runs.
"""

from __future__ import annotations

import hashlib
import json
import logging
from typing import Any

from kitsune_styles.components.merge import deep_merge
from kitsune_styles.components.schema import SchemaProcessor
from kitsune_styles.components.theme_store import StyleProcessorPort
from kitsune_styles.domain.errors import StyleProcessingError, format_path

from .models import BootstrapError, BootstrapInput, BootstrapOutput
from .ports import FileSystemPort

logger = logging.getLogger(__name__)

DEFAULT_CHECKSUM = "default"


def create_checksum(text: str) -> str:
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def read_cache(fs: FileSystemPort, bootstrap_input: BootstrapInput) -> dict[str, Any] | None:
    """Read the existing cache file; a missing or unreadable cache is None."""
    if not fs.exists(bootstrap_input.cache_path):
        return None
    try:
        cache = json.loads(fs.read_text(bootstrap_input.cache_path))
    except ValueError:
        logger.warning("Ignoring unreadable cache at %s", bootstrap_input.cache_path)
        return None
    return cache if isinstance(cache, dict) else None


def create_writable_cache(checksum: str, styles: dict[str, Any]) -> str:
    return json.dumps({"checksum": checksum, "styles": styles}, indent=2)


def run_bootstrap(
    bootstrap_input: BootstrapInput,
    fs: FileSystemPort,
    processor: StyleProcessorPort | None = None,
) -> BootstrapOutput:
    """Regenerate the styles cache if the custom mapping changed.

    The cache is (re)written when it does not exist yet, when it was written
    without a custom mapping, or when the custom mapping checksum differs.

    Args:
        bootstrap_input: Mapping and cache locations.
        fs: File system port.
        processor: Style processor. Uses a SchemaProcessor if None.

    Returns:
        BootstrapOutput describing what happened.
    """
    if not fs.exists(bootstrap_input.mapping_path):
        return BootstrapOutput.failed(
            BootstrapError(
                code="MAPPING_NOT_FOUND",
                message="Mapping file not found",
                path=str(bootstrap_input.mapping_path),
            )
        )

    custom_mapping: dict[str, Any] | None = None
    next_checksum = DEFAULT_CHECKSUM
    custom_path = bootstrap_input.custom_mapping_path

    try:
        base_mapping = fs.read_document(bootstrap_input.mapping_path)

        if custom_path is not None:
            if not fs.exists(custom_path):
                return BootstrapOutput.failed(
                    BootstrapError(
                        code="CUSTOM_MAPPING_NOT_FOUND",
                        message="Custom mapping file not found",
                        path=str(custom_path),
                    )
                )
            next_checksum = create_checksum(fs.read_text(custom_path))
            custom_mapping = fs.read_document(custom_path)
    except ValueError as e:
        return BootstrapOutput.failed(BootstrapError(code="INVALID_DOCUMENT", message=str(e)))

    cache = read_cache(fs, bootstrap_input)
    actual_checksum = (cache or {}).get("checksum") or DEFAULT_CHECKSUM

    if actual_checksum != DEFAULT_CHECKSUM and actual_checksum == next_checksum:
        logger.info("Styles cache is up to date (%s)", bootstrap_input.cache_path)
        styles = (cache or {}).get("styles") or {}
        return BootstrapOutput.up_to_date(next_checksum, bootstrap_input.cache_path, len(styles))

    mapping = deep_merge(base_mapping, custom_mapping)
    try:
        styles = (processor or SchemaProcessor()).process(mapping)
    except StyleProcessingError as e:
        return BootstrapOutput.failed(
            BootstrapError(
                code="PROCESSING_FAILED",
                message=str(e),
                path=format_path(getattr(e, "path", ())) or None,
            )
        )

    fs.write_text(bootstrap_input.cache_path, create_writable_cache(next_checksum, styles))
    logger.info(
        "Generated %d style entries into %s", len(styles), bootstrap_input.cache_path
    )
    return BootstrapOutput.generated(next_checksum, bootstrap_input.cache_path, len(styles))


def run(
    bootstrap_input: BootstrapInput,
    fs: FileSystemPort,
    processor: StyleProcessorPort | None = None,
) -> BootstrapOutput:
    """Main entry point for the bootstrap component."""
    return run_bootstrap(bootstrap_input, fs, processor)
