from __future__ import annotations


class DescriptorError(ValueError):
    """Raised when a build descriptor violates the descriptor contract."""
