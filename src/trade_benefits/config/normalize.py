"""Input normalisation — raw form values → well-formed numbers.

Form fields arrive as numbers, as text with thousands separators
("1,250,000"), blank, or missing entirely.  Nothing here raises: an
unusable value degrades to the field's fallback.

The ``Annotated`` aliases at the bottom plug these rules into the
pydantic input records, so a record built from raw UI state is already
normalised by the time the calculators see it.
"""

from __future__ import annotations

import logging
import math
from functools import partial
from typing import Annotated, Any

from pydantic import BeforeValidator

logger = logging.getLogger(__name__)


def parse_number(raw: Any, fallback: float = 0.0) -> float:
    """Coerce ``raw`` to a finite float, or return ``fallback``.

    Text has ``,`` thousands separators stripped before parsing.
    NaN and ±inf count as unparsable.
    """
    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        text = "" if raw is None else str(raw).replace(",", "").strip()
        if not text:
            # Blank input reads as zero, like an empty numeric form field
            value = 0.0 if raw is not None else math.nan
        elif "_" in text or not text.isascii():
            # float() takes digit separators and Unicode digits; form input does not
            value = math.nan
        else:
            try:
                value = float(text)
            except ValueError:
                value = math.nan

    if not math.isfinite(value):
        logger.debug("Unparsable numeric input %r, using fallback %s", raw, fallback)
        return fallback
    return value


def clamp(v: float, lo: float, hi: float) -> float:
    """Restrict ``v`` to ``[lo, hi]``."""
    return max(lo, min(hi, v))


def non_negative(raw: Any, fallback: float = 0.0) -> float:
    """Money / days / counts: parse, then floor at 0 (no upper bound)."""
    return max(0.0, parse_number(raw, fallback))


def percent(raw: Any, fallback: float = 0.0) -> float:
    """Percentages: parse, then clamp to ``[0, 100]``."""
    return clamp(parse_number(raw, fallback), 0.0, 100.0)


# ── Field types for the input records ─────────────────────────────────────

NonNegative = Annotated[float, BeforeValidator(non_negative)]
"""Floored at 0, fallback 0.  Also used for discount percentages (no cap)."""

Percent = Annotated[float, BeforeValidator(percent)]
"""Clamped to [0, 100], fallback 0."""

PercentDefaultFull = Annotated[float, BeforeValidator(partial(percent, fallback=100.0))]
"""Clamped to [0, 100], fallback 100 (shares and uptakes)."""
