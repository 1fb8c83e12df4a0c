"""Per-vector configuration."""

from dataclasses import asdict, dataclass, fields
from typing import Any, Mapping, Optional, Union

from vecstate.config.settings import DEFAULT_HISTORY_LENGTH


@dataclass(frozen=True)
class VectorOptions:
    """Configuration recognised by vector constructors.

    Attributes:
        history (int): Maximum number of snapshots retained by ``save()``. ``0`` disables history.
    """

    history: int = DEFAULT_HISTORY_LENGTH

    def __post_init__(self):
        if isinstance(self.history, bool) or not isinstance(self.history, int):
            raise TypeError(f"history must be an integer, got {type(self.history).__name__}")
        if self.history < 0:
            raise ValueError("history must be non-negative")

    def to_dict(self) -> dict:
        return asdict(self)


OptionsLike = Union[None, VectorOptions, Mapping[str, Any]]


def resolve_options(options: OptionsLike = None) -> VectorOptions:
    """Normalise a constructor ``options`` argument into a ``VectorOptions``.

    Accepts ``None`` (defaults), an existing ``VectorOptions`` or a mapping such as ``{"history": 5}``.
    """
    if options is None:
        return VectorOptions()
    if isinstance(options, VectorOptions):
        return options
    if isinstance(options, Mapping):
        known = {f.name for f in fields(VectorOptions)}
        unknown = set(options) - known
        if unknown:
            raise ValueError(f"Unknown vector options: {', '.join(sorted(unknown))}")
        return VectorOptions(**options)
    raise TypeError(f"options must be a mapping or VectorOptions, got {type(options).__name__}")


def history_enabled(options: Optional[VectorOptions]) -> bool:
    return options is not None and options.history > 0
