"""Request handlers and version history."""

from .generate import GenerateHandler
from .versions import Version, VersionStore

__all__ = ["GenerateHandler", "Version", "VersionStore"]
