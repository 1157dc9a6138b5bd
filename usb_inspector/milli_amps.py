"""Value object for current draw reported in milliamps."""

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MilliAmps:
    """A non-negative current quantity in milliamps."""

    value: int

    def __str__(self) -> str:
        return f"{self.value} mA"

    @classmethod
    def parse(cls, text: str | None) -> "MilliAmps | None":
        """Parse the digits of a free-form reading such as "500mA".

        Every non-digit character is dropped, so "0.5 A" reads as 5. No digits
        at all means the reading is unknown, which is not the same as zero. So is
        a digit run too long to convert.
        """
        if text is None:
            return None
        digits = "".join(ch for ch in text if ch.isdecimal())
        if not digits:
            return None
        try:
            return cls(int(digits))
        except ValueError:
            logger.debug("Ignoring current reading with %d digits", len(digits))
            return None
