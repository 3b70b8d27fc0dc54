"""
Merge component - non-destructive deep merge of mapping documents.
"""

from ._impl import classify, deep_merge
from .component import create_mapping, merge_mapping, run
from .models import CreateMappingInput, ValueKind

__all__ = [
    # Entry points
    "run",
    "create_mapping",
    "merge_mapping",
    # Functions
    "deep_merge",
    "classify",
    # Models
    "CreateMappingInput",
    "ValueKind",
]
