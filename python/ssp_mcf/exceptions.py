"""Exceptions raised by the solver."""


class FlowError(Exception):
    """Base class for every error raised by ssp-mcf."""


class InvalidArgumentError(FlowError, ValueError):
    """The caller supplied structurally invalid input.

    Raised before the graph is mutated or any path search starts, so the
    caller can correct the input and retry.
    """


class InvalidStateError(FlowError, RuntimeError):
    """The computation cannot produce a trustworthy answer.

    Raised for negative-cost cycles and for failed conservation checks. The
    solve call is aborted and no partial result is returned.
    """


__all__ = ["FlowError", "InvalidArgumentError", "InvalidStateError"]
