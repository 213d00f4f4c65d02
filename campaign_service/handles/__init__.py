"""
Resource Handle Lifecycle

CrudCrud buckets expire after roughly a day. These components keep a usable
bucket id (the "handle") available to every data operation.
"""

from .manager import HandleLifecycleManager
from .provisioner import (
    HtmlDiscoveryProvisioner,
    ManualProvisioner,
    build_extraction_patterns,
    extract_handle,
)
from .store import FileHandleStore, MemoryHandleStore
from .validator import HandleValidator, classify_status

__all__ = [
    "HandleLifecycleManager",
    "HtmlDiscoveryProvisioner",
    "ManualProvisioner",
    "build_extraction_patterns",
    "extract_handle",
    "FileHandleStore",
    "MemoryHandleStore",
    "HandleValidator",
    "classify_status",
]
