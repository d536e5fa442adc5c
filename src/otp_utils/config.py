"""
Configuration value objects for the HOTP and TOTP generators.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from .hmac_algorithm import HmacAlgorithm


class TimeUnit(Enum):
    """Units a time step can be expressed in, valued in milliseconds."""

    MILLISECONDS = 1
    SECONDS = 1_000
    MINUTES = 60_000
    HOURS = 3_600_000
    DAYS = 86_400_000

    def to_millis(self, duration: int) -> int:
        return duration * self.value

    def to_seconds(self, duration: int) -> int:
        """Convert to whole seconds, truncating any fraction."""
        millis = self.to_millis(duration)
        seconds = abs(millis) // 1_000
        return -seconds if millis < 0 else seconds


def _require_int(name: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")


def _coerce_algorithm(value: Union[HmacAlgorithm, str]) -> HmacAlgorithm:
    if isinstance(value, HmacAlgorithm):
        return value
    if isinstance(value, str):
        return HmacAlgorithm.from_name(value)
    raise TypeError(f"hmac_algorithm must be an HmacAlgorithm or a name, got {type(value).__name__}")


@dataclass(frozen=True)
class HmacOneTimePasswordConfig:
    """
    Settings for HMAC-based one-time passwords.

    Attributes:
        code_digits: Length of the generated code. RFC 4226 recommends 6 to 8;
            0 is accepted and yields an empty code.
        hmac_algorithm: Hash function used for the HMAC.
    """

    code_digits: int
    hmac_algorithm: HmacAlgorithm

    def __post_init__(self):
        _require_int("code_digits", self.code_digits)
        if self.code_digits < 0:
            raise ValueError("code_digits must be zero or a positive integer")
        object.__setattr__(self, "hmac_algorithm", _coerce_algorithm(self.hmac_algorithm))


@dataclass(frozen=True)
class TimeBasedOneTimePasswordConfig:
    """
    Settings for time-based one-time passwords.

    A time step of 0 is accepted; every timestamp then maps to counter 0.
    """

    time_step: int
    time_step_unit: TimeUnit
    code_digits: int
    hmac_algorithm: HmacAlgorithm
    hmac_config: HmacOneTimePasswordConfig = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        _require_int("time_step", self.time_step)
        if self.time_step < 0:
            raise ValueError("time_step must be zero or a positive integer")
        if not isinstance(self.time_step_unit, TimeUnit):
            raise TypeError("time_step_unit must be a TimeUnit")
        hmac_config = HmacOneTimePasswordConfig(self.code_digits, self.hmac_algorithm)
        object.__setattr__(self, "hmac_algorithm", hmac_config.hmac_algorithm)
        object.__setattr__(self, "hmac_config", hmac_config)

    @property
    def time_step_millis(self) -> int:
        return self.time_step_unit.to_millis(self.time_step)
