"""
Exception hierarchy for vctr.

All exceptions inherit from VctrError to allow catching any
library-specific error. Messages are stable so that callers and test
suites can match on them.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Every failure is raised before any partial mutation of a result
    - Never catch and re-raise with less information
"""

# Stable messages, matched verbatim by callers.
OUT_OF_BOUNDS_MESSAGE = "index out of bounds."
UNEQUAL_SIZES_MESSAGE = "unequal vector sizes."
INVALID_COLUMN_SIZE_MESSAGE = "Invalid column size."
NULL_DOT_PRODUCT_MESSAGE = "cannot dot product null vectors."
ZERO_MAGNITUDE_MESSAGE = "cannot compute the unit vector of a zero-magnitude vector."
NON_FINITE_MAGNITUDE_MESSAGE = "cannot compute the unit vector of a vector with non-finite magnitude."
NOT_IMPLEMENTED_MESSAGE = "not yet implemented"
STALE_CURSOR_MESSAGE = "cursor no longer refers to the vector's buffer."


class VctrError(Exception):
    """Base exception for all vctr errors."""
    pass


class ValidationError(VctrError):
    """
    Input validation failed.

    Raised when user-provided inputs (elements, sizes, scalars, policy
    fields) fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Operand sizes are inconsistent.

    Raised when a binary operation (add, subtract, dot product) or a
    matrix construction receives operands of differing lengths.

    Attributes:
        expected: Length required by the left operand or first row
        actual: Length that was supplied
    """

    def __init__(
        self,
        message: str = UNEQUAL_SIZES_MESSAGE,
        expected: int | None = None,
        actual: int | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class OutOfBoundsError(VctrError, IndexError):
    """
    Indexed access outside ``[0, dimensions)``.

    Attributes:
        index: The offending index
        dimensions: Element count of the container that was accessed
    """

    def __init__(
        self,
        message: str = OUT_OF_BOUNDS_MESSAGE,
        index: int | None = None,
        dimensions: int | None = None,
    ):
        super().__init__(message)
        self.index = index
        self.dimensions = dimensions


class NumericalError(VctrError):
    """
    Numerical computation failed.

    Base class for errors arising from the values involved rather than
    the shape of the inputs.
    """
    pass


class DegenerateOperandError(NumericalError):
    """
    Operation is undefined for the given operand.
    Raised for the dot product of two zero-dimension vectors and for the
    unit vector of a vector whose magnitude is zero or not finite.
    unit vector of a zero-magnitude vector.

    Attributes:
        operation: Name of the operation that was refused
    """

    def __init__(self, message: str, operation: str | None = None):
        super().__init__(message)
        self.operation = operation


class StaleCursorError(VctrError):
    """Cursor dereferenced after its vector released or replaced its buffer."""

    def __init__(self, message: str = STALE_CURSOR_MESSAGE):
        super().__init__(message)


class SolverNotImplementedError(VctrError, NotImplementedError):
    """
    Requested linear-system solve algorithm is not available.

    Attributes:
        algorithm: The algorithm that was requested
    """

    def __init__(self, message: str = NOT_IMPLEMENTED_MESSAGE, algorithm=None):
        super().__init__(message)
        self.algorithm = algorithm
