"""
Core protocols for pymatrix.

These define the structural numeric-capability interface a matrix element
type must satisfy. We use Protocol (structural typing) rather than ABC
(nominal typing) so int, float, complex, Fraction, Decimal and numpy
scalars all qualify without registration.

Design Principles:
    - Minimal contracts: prescribe only what Matrix actually calls
    - Type-safe: the element TypeVar is bound to Scalar
"""

from typing import Protocol, TypeVar, Any, runtime_checkable


@runtime_checkable
class Scalar(Protocol):
    """
    Element type usable inside a Matrix.

    Multiplication is needed by the matrix and scalar products, addition
    by add and the sum of products. Subtraction is optional: only sub
    calls it. Semiring-style types with just + and * qualify. The zero
    and one values come from the matrix's ElementType, not from the element.
    """

    def __add__(self, other: Any) -> Any:
        ...

    def __mul__(self, other: Any) -> Any:
        ...


T = TypeVar('T', bound=Scalar)  # Element type
T_co = TypeVar('T_co', covariant=True)


@runtime_checkable
class ElementType(Protocol[T_co]):
    """
    Constructor of element values from small integer literals.

    Matrix calls dtype(0) and dtype(1) to materialize zero and one.
    Every numeric type constructor qualifies: int, float, complex,
    fractions.Fraction, decimal.Decimal, numpy.int32, ...
    """

    def __call__(self, value: int, /) -> T_co:
        ...
