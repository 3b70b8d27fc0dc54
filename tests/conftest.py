import json
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest

from kitsune_styles.adapters.fs.filesystem import default_filesystem
from kitsune_styles.components.mapping import clear_processor_cache

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def fresh_processor_cache() -> Iterator[None]:
    """Every test starts and ends with an empty shared processor cache."""
    clear_processor_cache()
    yield
    clear_processor_cache()


@pytest.fixture
def mapping_path() -> Path:
    return FIXTURES_DIR / "mapping.yaml"


@pytest.fixture
def custom_mapping_path() -> Path:
    return FIXTURES_DIR / "custom-mapping.json"


@pytest.fixture
def base_mapping(mapping_path: Path) -> dict[str, Any]:
    """The sample theme mapping: Button and Input."""
    return default_filesystem.read_document(mapping_path)


@pytest.fixture
def custom_mapping(custom_mapping_path: Path) -> dict[str, Any]:
    data: dict[str, Any] = json.loads(custom_mapping_path.read_text(encoding="utf-8"))
    return data
