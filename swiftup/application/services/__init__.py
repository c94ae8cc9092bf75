"""Application services - use case implementations."""

from .toolchain_service import InstallResult, ToolchainService, UpdateResult

__all__ = [
    "ToolchainService",
    "InstallResult",
    "UpdateResult",
]
