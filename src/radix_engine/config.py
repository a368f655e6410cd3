"""Per-call sort configuration."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional, Union

from .digits import validate_base
from .errors import ConfigurationError
from .keys import KeyType


class Strategy(str, enum.Enum):
    MSD = "msd"
    LSD = "lsd"


@dataclass(frozen=True)
class SortOptions:
    """
    Validated options for one sort.

    ``strategy`` and ``key_type`` also accept their string names
    (``"lsd"``, ``"int16"``).
    """

    base: int = 10
    strategy: Union[Strategy, str] = Strategy.MSD
    handle_negative: bool = False
    key_type: Optional[Union[KeyType, str]] = None

    def __post_init__(self) -> None:
        validate_base(self.base)
        name = self.strategy.value if isinstance(self.strategy, Strategy) else str(self.strategy).lower()
        try:
            strategy = Strategy(name)
        except ValueError:
            raise ValueError(f"Unknown strategy {self.strategy!r}; choose 'msd' or 'lsd'") from None
        object.__setattr__(self, "strategy", strategy)

        if not isinstance(self.handle_negative, bool):
            raise ConfigurationError(f"handle_negative must be a bool, got {self.handle_negative!r}")

        if isinstance(self.key_type, str):
            object.__setattr__(self, "key_type", KeyType.by_name(self.key_type))
        elif self.key_type is not None and not isinstance(self.key_type, KeyType):
            raise ConfigurationError(f"key_type must be a KeyType or its name, got {self.key_type!r}")
