"""Views over a mathematical program.

A view wraps another program (its delegate) and exposes the same interface.
Reads go to the delegate, possibly transformed; writes are either forwarded
untransformed or refused. Views hold no copy of the data, so changes to the
delegate are visible through the view immediately. Views can be stacked.
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from mathprog.errors import UnsupportedOperationError
from mathprog.logging import get_logger
from mathprog.model.base import ReadableMP, WritableMP
from mathprog.model.elements import Constraint, Objective, Variable, VariableKind

LOGGER = get_logger(__name__)

__all__ = ["MPView", "ReadOnlyView", "OwnNameView", "BoolToIntView"]


class MPView(WritableMP):
    """Base view: delegates every read and forwards every write.

    Writes raise ``UnsupportedOperationError`` when the delegate is not
    writable. Views are unhashable because the delegate may change.

    Args:
        delegate: Program to wrap.
    """

    __slots__ = ("_delegate",)

    def __init__(self, delegate: ReadableMP) -> None:
        if not isinstance(delegate, ReadableMP):
            raise TypeError(f"Expected a ReadableMP, got {type(delegate).__name__}")
        self._delegate = delegate

    @property
    def delegate(self) -> ReadableMP:
        """The wrapped program."""
        return self._delegate

    def with_delegate(self, delegate: ReadableMP) -> "MPView":
        """Return the same kind of view, configured alike, over ``delegate``."""
        return type(self)(delegate)

    @property
    def name(self) -> str:
        return self._delegate.name

    @property
    def variables(self) -> Sequence[Variable]:
        return self._delegate.variables

    @property
    def constraints(self) -> Sequence[Constraint]:
        return self._delegate.constraints

    @property
    def objective(self) -> Objective:
        return self._delegate.objective

    def get_variable(self, description: str) -> Optional[Variable]:
        return self._delegate.get_variable(description)

    def variable_kind(self, variable: Variable) -> VariableKind:
        return self._delegate.variable_kind(variable)

    def variable_bounds(self, variable: Variable) -> Tuple[float, float]:
        return self._delegate.variable_bounds(variable)

    def _writable_delegate(self) -> WritableMP:
        if not isinstance(self._delegate, WritableMP):
            raise UnsupportedOperationError(
                f"{type(self).__name__} wraps a {type(self._delegate).__name__}, "
                "which does not support mutation."
            )
        return self._delegate

    def set_name(self, name: Optional[str]) -> bool:
        return self._writable_delegate().set_name(name)

    def add_variable(self, variable: Variable) -> bool:
        return self._writable_delegate().add_variable(variable)

    def remove_variable(self, variable: Variable) -> bool:
        return self._writable_delegate().remove_variable(variable)

    def add_constraint(self, constraint: Constraint) -> bool:
        return self._writable_delegate().add_constraint(constraint)

    def remove_constraint(self, constraint: Constraint) -> bool:
        return self._writable_delegate().remove_constraint(constraint)

    def set_objective(self, objective: Optional[Objective]) -> bool:
        return self._writable_delegate().set_objective(objective)

    def clear(self) -> bool:
        return self._writable_delegate().clear()


class ReadOnlyView(MPView):
    """A view that refuses every mutation.

    Holders of this view observe the changes made to the delegate by others.
    """

    __slots__ = ()

    @classmethod
    def of(cls, delegate: ReadableMP) -> "ReadOnlyView":
        """Return ``delegate`` if it is already read-only, else a new view."""
        if isinstance(delegate, ReadOnlyView):
            return delegate
        return cls(delegate)

    def _writable_delegate(self) -> WritableMP:
        raise UnsupportedOperationError("This program is read-only.")


class OwnNameView(MPView):
    """A view with its own name.

    ``name`` and ``set_name`` act on the private name only; everything else
    goes to the delegate. ``clear`` clears the delegate and the private name.

    Args:
        delegate: Program to wrap.
        name: Initial name of the view; None means the empty name.
    """

    __slots__ = ("_name",)

    def __init__(self, delegate: ReadableMP, name: Optional[str] = "") -> None:
        super().__init__(delegate)
        self._name = ""
        self.set_name(name)

    @property
    def name(self) -> str:
        return self._name

    def with_delegate(self, delegate: ReadableMP) -> "OwnNameView":
        return type(self)(delegate, self._name)

    def set_name(self, name: Optional[str]) -> bool:
        new_name = "" if name is None else name
        if not isinstance(new_name, str):
            raise TypeError(f"Name must be a string, got {type(new_name).__name__}")
        if new_name == self._name:
            return False
        self._name = new_name
        return True

    def clear(self) -> bool:
        changed = self._writable_delegate().clear()
        return self.set_name("") or changed


class BoolToIntView(MPView):
    """A view that reports every boolean variable as an integer variable.

    The bounds of a boolean variable become ``[max(0, lower), min(1, upper)]``,
    so the view admits exactly the same values. Other variables are reported
    unchanged, and the variable order is kept. Writes are forwarded to the
    delegate untransformed.

    Equality is structural equivalence (``mps_equivalent``): kinds and bounds
    are compared as reported by the view, and names are ignored.
    """

    __slots__ = ()

    def variable_kind(self, variable: Variable) -> VariableKind:
        kind = self._delegate.variable_kind(variable)
        return VariableKind.INT if kind is VariableKind.BOOL else kind

    def variable_bounds(self, variable: Variable) -> Tuple[float, float]:
        lower, upper = self._delegate.variable_bounds(variable)
        if self._delegate.variable_kind(variable) is VariableKind.BOOL:
            return (max(0.0, lower), min(1.0, upper))
        return (lower, upper)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ReadableMP):
            return NotImplemented
        from mathprog.equivalence import mps_equivalent

        return mps_equivalent(self, other)

    __hash__ = None  # type: ignore[assignment]
