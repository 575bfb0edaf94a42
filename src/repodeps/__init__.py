"""repodeps: Dependency resolution for versioned SDK component repositories."""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"
