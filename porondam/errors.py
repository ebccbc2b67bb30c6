"""Exception hierarchy raised by the Porondam scoring engine."""

from __future__ import annotations

from typing import Any

__all__ = [
    "PorondamError",
    "ChartValidationError",
    "OutOfRangeError",
    "MissingAttributeError",
    "UnknownNameError",
    "IncompleteMatrixError",
]


class PorondamError(Exception):
    """Base class for every error raised by :mod:`porondam`.

    Subclasses keep structured attributes next to the rendered message, so
    pickling restores both instead of re-running ``__init__``. Errors raised
    in worker processes reach the parent with their chart and field intact.
    """

    def __reduce__(self) -> tuple[Any, ...]:
        return _restore_error, (self.__class__, self.args, dict(self.__dict__))


def _restore_error(
    cls: type[PorondamError], args: tuple[Any, ...], state: dict[str, Any]
) -> PorondamError:
    error = cls.__new__(cls)
    Exception.__init__(error, *args)
    error.__dict__.update(state)
    return error


class ChartValidationError(PorondamError, ValueError):
    """Raised when caller-supplied chart attributes cannot be scored.

    ``chart`` identifies which of the two charts failed (``"chart_a"`` or
    ``"chart_b"``) once the error has passed through :func:`compute_match`;
    direct catalog lookups leave it as ``None``.
    """

    def __init__(self, field: str, reason: str, *, chart: str | None = None) -> None:
        self.field = field
        self.reason = reason
        self.chart = chart
        super().__init__(self._render())

    def _render(self) -> str:
        where = f"{self.chart}.{self.field}" if self.chart else self.field
        return f"{where}: {self.reason}"

    def for_chart(self, chart: str) -> ChartValidationError:
        """Return a copy of this error labelled with ``chart``."""

        clone = self.__class__.__new__(self.__class__)
        clone.__dict__.update(self.__dict__)
        clone.chart = chart
        Exception.__init__(clone, clone._render())
        return clone


class OutOfRangeError(ChartValidationError):
    """Raised for mansion, sign or pada values outside their valid range."""

    def __init__(
        self,
        field: str,
        value: Any,
        lower: int,
        upper: int,
        *,
        chart: str | None = None,
    ) -> None:
        self.value = value
        self.lower = lower
        self.upper = upper
        super().__init__(
            field,
            f"{value!r} is outside the valid range {lower}..{upper}",
            chart=chart,
        )


class MissingAttributeError(ChartValidationError):
    """Raised when neither an index nor a longitude supplies a required field."""


class UnknownNameError(PorondamError, KeyError):
    """Raised when a mansion or sign name is not present in the catalog."""

    def __str__(self) -> str:  # KeyError quotes its argument otherwise
        return str(self.args[0]) if self.args else ""


class IncompleteMatrixError(PorondamError, LookupError):
    """Raised when a compatibility matrix lacks a row or column it must define."""

    def __init__(self, matrix: str, row: str, column: str | None = None) -> None:
        self.matrix = matrix
        self.row = row
        self.column = column
        if column is None:
            message = f"{matrix} matrix has no row for {row!r}"
        else:
            message = f"{matrix} matrix has no entry for ({row!r}, {column!r})"
        super().__init__(message)
