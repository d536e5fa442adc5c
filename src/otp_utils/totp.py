"""
Time-based one-time password generation (RFC 6238).
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Union

from .config import TimeBasedOneTimePasswordConfig
from .hotp import HmacOneTimePasswordGenerator

logger = logging.getLogger(__name__)

Timestamp = Union[int, datetime]

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MILLISECOND = timedelta(milliseconds=1)


def to_epoch_millis(timestamp: Timestamp) -> int:
    """
    Convert a timestamp to milliseconds since the Unix epoch.

    Integers are taken as milliseconds already. Naive datetimes are
    interpreted as UTC.
    """
    if isinstance(timestamp, datetime):
        if timestamp.tzinfo is None:
            timestamp = timestamp.replace(tzinfo=timezone.utc)
        return (timestamp - _EPOCH) // _ONE_MILLISECOND
    if isinstance(timestamp, bool) or not isinstance(timestamp, int):
        raise TypeError(f"timestamp must be an int or a datetime, got {type(timestamp).__name__}")
    return timestamp


class TimeBasedOneTimePasswordGenerator:
    """Generates and validates one-time passwords bound to time steps."""

    def __init__(self, secret: bytes, config: TimeBasedOneTimePasswordConfig):
        self.config = config
        self._hotp = HmacOneTimePasswordGenerator(secret, config.hmac_config)

    def counter(self, timestamp: Timestamp) -> int:
        """
        Number of whole time steps elapsed between the epoch and `timestamp`.

        Floors towards negative infinity for timestamps before the epoch.
        A time step of 0 always yields counter 0.
        """
        millis = to_epoch_millis(timestamp)
        step_millis = self.config.time_step_millis
        if step_millis == 0:
            logger.debug("Time step is 0, using counter 0")
            return 0
        return millis // step_millis

    def timeslot_start(self, counter: int) -> int:
        """
        Start of the time slot of `counter` in milliseconds since the epoch.

        The product is exact, it is not truncated to 64 bits.
        """
        return counter * self.config.time_step_millis

    def generate(self, timestamp: Timestamp) -> str:
        """Generate the code valid at `timestamp` (epoch milliseconds or datetime)."""
        return self._hotp.generate(self.counter(timestamp))

    def is_valid(self, code: str, timestamp: Timestamp) -> bool:
        """Check whether `code` is the code valid at `timestamp`."""
        return self._hotp.is_valid(code, self.counter(timestamp))
