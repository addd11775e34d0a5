"""Exception hierarchy for dataportion.

All errors are raised synchronously where the violated constraint is
detected. Each class also derives from the matching builtin so that
callers catching ``ValueError`` or ``TypeError`` keep working.
"""


class PortionError(Exception):
    """Base class for every error raised by dataportion."""

    pass


class ParameterError(PortionError, ValueError):
    """Raised when an argument of ``portion`` violates its contract.

    Covers a missing or out-of-range ``proportion``, an unknown ``how``,
    a ``centers`` value that is not a positive integer and invalid
    ``ignore`` positions.
    """

    pass


class TypeMismatchError(PortionError, TypeError):
    """Raised when the data does not have the kind an operation requires.

    Examples are clustering strategies on textual data, or handing a
    matrix-only extraction a vector.
    """

    pass


class UnsupportedKindError(PortionError, TypeError):
    """Raised when no handling path exists for the given object."""

    pass
