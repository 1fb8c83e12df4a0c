from vecstate.config.options import VectorOptions
from vecstate.entities.data.exceptions import (
    InvalidArgument,
    PreconditionViolation,
    VectorError,
)
from vecstate.entities.data.history import SnapshotHistory
from vecstate.entities.data.vector import Vector2D, Vector3D, VectorBase

__all__ = [
    "InvalidArgument",
    "PreconditionViolation",
    "SnapshotHistory",
    "Vector2D",
    "Vector3D",
    "VectorBase",
    "VectorError",
    "VectorOptions",
]
