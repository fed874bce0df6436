"""Closed class hierarchies and their frozen variants."""

from __future__ import annotations

from dataclasses import FrozenInstanceError, dataclass
from typing import Any, dataclass_transform

__all__ = ['Sealed', 'variant']


class Sealed:
    """Mixin that closes a hierarchy to the module its root is defined in.

    The root is the class that lists ``Sealed`` as a direct base. Subclasses
    declared anywhere else raise ``TypeError`` at class creation time.
    """

    __slots__ = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        root = next(base for base in cls.__mro__ if Sealed in base.__bases__)
        if cls.__module__ != root.__module__:
            msg = f'{root.__name__} is a closed type; {cls.__qualname__} cannot extend it'
            raise TypeError(msg)


def _frozen_setattr(self: Any, name: str, value: Any) -> None:  # noqa: ARG001
    raise FrozenInstanceError(f'cannot assign to field {name!r}')


def _frozen_delattr(self: Any, name: str) -> None:  # noqa: ARG001
    raise FrozenInstanceError(f'cannot delete field {name!r}')


@dataclass_transform(frozen_default=True, eq_default=False)
def variant[C: type](cls: C) -> C:
    """Turn ``cls`` into a frozen, slotted dataclass without a generated ``__eq__``.

    Every attribute assignment or deletion raises ``FrozenInstanceError``,
    including names that are not fields. Internal state is set with
    ``object.__setattr__``.
    """
    cls = dataclass(frozen=True, slots=True, eq=False)(cls)
    cls.__setattr__ = _frozen_setattr
    cls.__delattr__ = _frozen_delattr
    return cls
