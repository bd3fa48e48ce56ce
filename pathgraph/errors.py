"""Exception types raised by PathGraph.

All errors derive from ``PathGraphError``. Each one also derives from the
built-in exception closest to its meaning, so ``except KeyError`` or
``except ValueError`` keeps working for callers that do not import this module.
"""

from __future__ import annotations


class PathGraphError(Exception):
    """Base class for all PathGraph errors."""

    def __str__(self) -> str:
        # KeyError would otherwise render the message with quotes
        return str(self.args[0]) if self.args else ""


class InvalidKeyError(PathGraphError, ValueError):
    """Key is the ``None`` sentinel or is not hashable."""


class DuplicateKeyError(PathGraphError, ValueError):
    """Key is already present in the map."""


class KeyNotFoundError(PathGraphError, KeyError):
    """Key is not present in the map."""


class UnknownNodeError(PathGraphError, KeyError):
    """Node is not present in the graph."""


class UnknownEdgeError(PathGraphError, KeyError):
    """Directed edge is not present in the graph."""


class InvalidWeightError(PathGraphError, ValueError):
    """Edge weight is negative, non-finite or not a number."""


class NoPathError(PathGraphError):
    """Both endpoints exist but no directed path connects them."""
