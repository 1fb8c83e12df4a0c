import logging
import math
from abc import ABC, abstractmethod
from typing import ClassVar, List, Optional, Tuple, Type, TypeVar

import numpy as np

from vecstate.config.options import (
    OptionsLike,
    VectorOptions,
    history_enabled,
    resolve_options,
)
from vecstate.config.settings import COORD_DTYPE
from vecstate.entities.data.exceptions import InvalidArgument, PreconditionViolation
from vecstate.entities.data.history import SnapshotHistory
from vecstate.global_utils.math_utils import clamp, lerp

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="VectorBase")

_SEQUENCE_TYPES = (tuple, list, np.ndarray)


class VectorBase(ABC):
    """Fixed-dimension mutable vector with change tracking and optional clamping bounds.

    Coordinates live in a numpy buffer owned by the instance. ``save()`` checkpoints the buffer;
    ``dirty`` reports whether it changed since, and with ``options.history > 0`` a bounded,
    most-recent-first log of checkpoints is kept.
    """

    __slots__ = ("_coords", "_saved", "_history", "_options", "_min", "_max")

    DIMENSIONS: ClassVar[int]
    AXES: ClassVar[Tuple[str, ...]]

    def __init__(self, *coords, options: OptionsLike = None):
        self._options = resolve_options(options)
        self._history = SnapshotHistory(self._options.history)
        self._min: Optional["VectorBase"] = None
        self._max: Optional["VectorBase"] = None
        self._coords = self.parse(*coords)
        self.save()

    @classmethod
    def parse(cls, *args) -> np.ndarray:
        """Normalise constructor-style arguments into a new coordinate buffer.

        Accepts exactly one of:
            - ``DIMENSIONS`` scalars, e.g. ``(1, 2)`` for a 2D vector
            - a single list, tuple or 1-D ndarray of length ``DIMENSIONS``
            - a single vector of the same class

        Raises:
            InvalidArgument: If the arguments match none of the accepted shapes.
        """
        n = cls.DIMENSIONS
        if len(args) == n:
            return cls._to_buffer(args)
        if len(args) == 1:
            arg = args[0]
            if isinstance(arg, _SEQUENCE_TYPES):
                if (isinstance(arg, np.ndarray) and arg.ndim != 1) or len(arg) != n:
                    raise InvalidArgument(f"array must be of length {n}")
                return cls._to_buffer(arg)
            if isinstance(arg, cls):
                return arg._coords.copy()
            raise InvalidArgument(f"argument must be an array or {cls.__name__}")
        if not args:
            raise InvalidArgument("must provide an argument")
        raise InvalidArgument(f"{cls.__name__} requires {n} coordinates, got {len(args)}")

    @classmethod
    def _to_buffer(cls, values) -> np.ndarray:
        coords = np.empty(cls.DIMENSIONS, dtype=COORD_DTYPE)
        try:
            for i, value in enumerate(values):
                coords[i] = float(value)
        except (TypeError, ValueError) as err:
            raise InvalidArgument(f"{cls.__name__} coordinates must be numeric") from err
        return coords

    @classmethod
    def lerp(cls: Type[T], v1, v2, amt: float) -> T:
        """Return a new vector interpolated between ``v1`` and ``v2`` by ``amt``. Neither input is modified."""
        return cls(lerp(cls.parse(v1), cls.parse(v2), amt))

    @abstractmethod
    def to_tuple(self) -> Tuple[float, ...]: ...

    ### Coordinates ###

    @property
    def coords(self) -> np.ndarray:
        """The live coordinate buffer. Mutating it in place mutates the vector."""
        return self._coords

    @coords.setter
    def coords(self, value) -> None:
        self.set(value)

    @property
    def x(self) -> float:
        return float(self._coords[0])

    @x.setter
    def x(self, value: float) -> None:
        self._coords[0] = value

    @property
    def y(self) -> float:
        return float(self._coords[1])

    @y.setter
    def y(self, value: float) -> None:
        self._coords[1] = value

    @property
    def options(self) -> VectorOptions:
        return self._options

    def set(self, *coords) -> None:
        """Replace every coordinate. Does not save."""
        self._coords[:] = self.parse(*coords)

    def add(self, *deltas) -> None:
        self._coords += self.parse(*deltas)

    def subtract(self, *deltas) -> None:
        self._coords -= self.parse(*deltas)

    def lerp_to(self, *args) -> None:
        """Move each coordinate towards a target by ``amt``.

        Called as ``lerp_to(x, y, amt)`` (``lerp_to(x, y, z, amt)`` in 3D); the target may also be
        given as a single sequence or vector: ``lerp_to(other, amt)``. ``amt`` is not clamped.
        """
        if len(args) < 2:
            raise InvalidArgument("must provide a target and an amount")
        *target, amt = args
        self._coords[:] = lerp(self._coords, self.parse(*target), amt)

    def has_value(self) -> bool:
        return bool(np.any(self._coords != 0))

    def copy(self: T) -> T:
        """Independent copy with the same options. History, saved state and bounds start fresh."""
        return type(self)(self, options=self._options)

    def opposite(self: T) -> T:
        return type(self)(-self._coords)

    def to_array(self) -> np.ndarray:
        return self._coords.copy()

    ### Change tracking ###

    def save(self) -> None:
        """Checkpoint the current coordinates, pushing them onto the history when enabled."""
        self._saved = self._coords.copy()
        if history_enabled(self._options):
            self._history.push(self._coords)

    @property
    def dirty(self) -> bool:
        """True if any coordinate differs (exactly) from the last ``save()``."""
        return bool(np.any(self._coords != self._saved))

    @property
    def saved(self) -> np.ndarray:
        return self._saved.copy()

    @property
    def history(self) -> List[np.ndarray]:
        """Copies of the retained snapshots, most recent first."""
        return self._history.snapshots()

    ### Bounds ###

    def max(self, *coords) -> None:
        """Set the upper bound used by ``clamp()`` and ``limited()``. Existing coordinates are left alone."""
        self._max = type(self)(*coords)
        logger.debug("%s upper bound set to %s", type(self).__name__, self._max.to_tuple())

    def min(self, *coords) -> None:
        """Set the lower bound used by ``clamp()`` and ``limited()``. Existing coordinates are left alone."""
        self._min = type(self)(*coords)
        logger.debug("%s lower bound set to %s", type(self).__name__, self._min.to_tuple())

    @property
    def max_bound(self: T) -> Optional[T]:
        return None if self._max is None else self._max.copy()

    @property
    def min_bound(self: T) -> Optional[T]:
        return None if self._min is None else self._min.copy()

    def clear_bounds(self) -> None:
        self._min = None
        self._max = None

    def _bounds(self) -> Tuple[np.ndarray, np.ndarray]:
        missing = [name for name, bound in (("min", self._min), ("max", self._max)) if bound is None]
        if missing:
            raise PreconditionViolation(
                f"{' and '.join(missing)} bound not set on {type(self).__name__}; "
                "set both min() and max() before clamping"
            )
        return self._min._coords, self._max._coords

    def clamp(self) -> None:
        """Clamp every coordinate in place to [min, max]."""
        lower, upper = self._bounds()
        self._coords[:] = clamp(self._coords, lower, upper)
        logger.debug("%s clamped to %s", type(self).__name__, self.to_tuple())

    def limited(self: T) -> T:
        """Return a new vector clamped to [min, max], leaving this one untouched."""
        lower, upper = self._bounds()
        return type(self)(clamp(self._coords, lower, upper))

    ### Protocol ###

    def __iter__(self):
        for value in self._coords:
            yield float(value)

    def __len__(self) -> int:
        return self.DIMENSIONS

    def __getitem__(self, index: int) -> float:
        try:
            return float(self._coords[index])
        except IndexError:
            raise IndexError(f"{type(self).__name__} index out of range") from None

    def __add__(self: T, other: T) -> T:
        if not isinstance(other, type(self)):
            return NotImplemented
        return type(self)(self._coords + other._coords)

    def __sub__(self: T, other: T) -> T:
        if not isinstance(other, type(self)):
            return NotImplemented
        return type(self)(self._coords - other._coords)

    def __neg__(self: T) -> T:
        return self.opposite()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return all(math.isclose(a, b) for a, b in zip(self, other))

    __hash__ = None

    def __array__(self, dtype=None, copy=None):
        return np.array(self._coords, dtype=dtype)

    def __repr__(self):
        axes = ", ".join(f"{axis}={value}" for axis, value in zip(self.AXES, self))
        return f"{type(self).__name__}({axes})"


class Vector2D(VectorBase):
    __slots__ = ()

    DIMENSIONS = 2
    AXES = ("x", "y")

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


class Vector3D(VectorBase):
    __slots__ = ()

    DIMENSIONS = 3
    AXES = ("x", "y", "z")

    @property
    def z(self) -> float:
        return float(self._coords[2])

    @z.setter
    def z(self, value: float) -> None:
        self._coords[2] = value

    def to_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def to_2d(self) -> Vector2D:
        return Vector2D(self.x, self.y)
