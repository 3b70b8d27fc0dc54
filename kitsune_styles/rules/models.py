from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class StylesConfig(BaseModel):
    """Build configuration for style generation."""

    model_config = ConfigDict(extra="forbid")

    mapping_path: Path
    custom_mapping_path: Path | None = None
    cache_dir: Path = Path(".cache/kitsune-styles")
    cache_name: str = "generated.json"
    log_level: LogLevel = "INFO"

    @property
    def cache_path(self) -> Path:
        return self.cache_dir / self.cache_name

    def resolved(self, base_dir: Path) -> "StylesConfig":
        """Copy with every relative path anchored at ``base_dir``."""

        def anchor(path: Path) -> Path:
            return path if path.is_absolute() else base_dir / path

        return self.model_copy(
            update={
                "mapping_path": anchor(self.mapping_path),
                "custom_mapping_path": (
                    anchor(self.custom_mapping_path) if self.custom_mapping_path else None
                ),
                "cache_dir": anchor(self.cache_dir),
            }
        )
