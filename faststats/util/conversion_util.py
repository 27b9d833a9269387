from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP


class Conversion:
    """Decimal and name helpers shared by the result queries.

    Attempt columns use the sign of the stored value to encode the outcome:
    a strictly positive value is a made lift of that weight, while zero,
    a negative value or NULL is a miss (or an attempt that was never taken).
    """

    iwf_name_pattern = re.compile(r"[^a-z ]+")

    # make rates are rounded to this many places before scaling to a percentage
    make_rate_places = Decimal("0.00001")
    hundred = Decimal(100)

    @staticmethod
    def to_decimal(value) -> Decimal | None:
        if value is None:
            return None
        if isinstance(value, Decimal):
            return value
        if isinstance(value, float):
            # repr gives the shortest string that round-trips, e.g. 102.5 not 102.4999...
            return Decimal(repr(value))
        try:
            return Decimal(str(value).strip())
        except InvalidOperation as exc:
            raise ValueError(f"Invalid decimal value: {value!r}") from exc

    @staticmethod
    def is_made(attempt: Decimal | None) -> bool:
        return attempt is not None and attempt > 0

    @staticmethod
    def made_count(*attempts: Decimal | None) -> int:
        return sum(1 for attempt in attempts if Conversion.is_made(attempt))

    @staticmethod
    def make_rate(total_made: int, meet_count: int) -> Decimal:
        """Percentage of attempts made, out of three attempts per meet."""
        if meet_count <= 0:
            return Decimal(0)
        ratio = (Decimal(total_made) / Decimal(3 * meet_count)).quantize(
            Conversion.make_rate_places, rounding=ROUND_HALF_UP
        )
        return ratio * Conversion.hundred

    @staticmethod
    def like_pattern(name_fragment: str) -> str:
        # "john smith" -> "%john%smith%"
        return "%" + name_fragment.replace(" ", "%") + "%"

    @staticmethod
    def to_iwf_name(name: str) -> tuple[str, str]:
        """Split a lifter name into the (first, last) pair the IWF search expects.

        Punctuation is dropped rather than replaced, so "D'angelo" becomes
        "dangelo". A single token yields an empty last name.
        """
        lowered = Conversion.iwf_name_pattern.sub("", (name or "").lower())
        parts = lowered.split(" ")
        if len(parts) > 1:
            return parts[0], parts[-1]
        return lowered, ""
