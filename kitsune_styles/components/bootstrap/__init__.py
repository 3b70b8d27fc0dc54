"""Bootstrap component for build-time style generation.

Processes the configured mapping and keeps the result in a checksum-guarded
cache file so that unchanged custom mappings are not processed twice.
"""

from .component import DEFAULT_CHECKSUM, create_checksum, run, run_bootstrap
from .models import BootstrapError, BootstrapInput, BootstrapOutput
from .ports import FileSystemPort

__all__ = [
    # Entry points
    "run",
    "run_bootstrap",
    "create_checksum",
    "DEFAULT_CHECKSUM",
    # Models
    "BootstrapInput",
    "BootstrapOutput",
    "BootstrapError",
    # Ports
    "FileSystemPort",
]
