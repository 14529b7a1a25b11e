from __future__ import annotations

"""Exception types raised by the colorscheme engine."""


class InvalidArgument(ValueError):
    """A setter or constructor received a missing, malformed or out-of-range value."""


class InvalidState(RuntimeError):
    """The scheme orchestrator reached a configuration the setters never produce."""


__all__ = ["InvalidArgument", "InvalidState"]
