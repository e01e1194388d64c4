"""Business logic for recording user-entered draws.

A submission either becomes exactly one Draw or is silently discarded: there
is no partial success and nothing is raised for bad entries.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from datetime import datetime, timezone
from typing import Any

from lotto649.models.draw import MAX_NUMBER, MIN_NUMBER, PICK_COUNT, Draw
from lotto649.services.frequency_service import recompute_frequency
from lotto649.state import AppState

logger = logging.getLogger(__name__)

_LEADING_INT_RE = re.compile(r"[+-]?\d+")


def parse_number(raw: Any) -> int | None:
    """Parse one freeform entry the way a form field is read.

    Takes the leading base-10 integer after stripping whitespace, so ``"3.5"``
    gives 3, ``"12abc"`` gives 12 and a JSON ``7.0`` gives 7. Returns None
    when there is no leading integer.
    """

    if isinstance(raw, bool) or raw is None:
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        raw = repr(raw)
    if isinstance(raw, str):
        m = _LEADING_INT_RE.match(raw.strip())
        if m:
            return int(m.group(0), 10)
    return None


def parse_date(raw: Any) -> datetime | None:
    """Parse an optional ISO date/datetime. Blank means now; junk means None."""

    if isinstance(raw, datetime):
        value = raw
    elif raw is None or (isinstance(raw, str) and not raw.strip()):
        return datetime.now(timezone.utc)
    elif isinstance(raw, str):
        try:
            value = datetime.fromisoformat(raw.strip().replace("Z", "+00:00"))
        except ValueError:
            return None
    else:
        return None

    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


def _in_range(n: int) -> bool:
    return MIN_NUMBER <= n <= MAX_NUMBER


def build_draw(numbers: Iterable[Any], bonus: Any, date: Any = None) -> tuple[Draw | None, str | None]:
    """Normalize raw form entries into a Draw.

    Returns ``(draw, None)`` on success or ``(None, reason)`` on discard.
    """

    parsed = [n for n in (parse_number(x) for x in numbers) if n is not None]
    if len(parsed) != PICK_COUNT:
        return None, f"expected {PICK_COUNT} numeric entries, got {len(parsed)}"

    parsed_bonus = parse_number(bonus)
    if parsed_bonus is None:
        return None, "bonus is not numeric"

    out_of_range = [n for n in (*parsed, parsed_bonus) if not _in_range(n)]
    if out_of_range:
        return None, f"numbers outside {MIN_NUMBER}..{MAX_NUMBER}: {out_of_range}"

    parsed_date = parse_date(date)
    if parsed_date is None:
        return None, f"unparsable date {date!r}"

    return Draw(date=parsed_date, numbers=tuple(parsed), bonus=parsed_bonus), None  # type: ignore[arg-type]


class DrawService:
    """Draw submission use-cases."""

    def submit(self, state: AppState, numbers: Iterable[Any], bonus: Any, date: Any = None) -> Draw | None:
        """Record a draw and refresh the frequency snapshot.

        Returns None when the submission was discarded.
        """

        draw, reason = build_draw(numbers, bonus, date)
        if draw is None:
            logger.info("Draw submission discarded: %s", reason)
            return None

        with state.lock:
            state.draws.append(draw)
            recompute_frequency(state)

        logger.info("Recorded draw %s + %s (total draws: %d)", list(draw.numbers), draw.bonus, state.draws.count())
        return draw

    def list_draws(self, state: AppState) -> list[Draw]:
        return list(state.draws.list_all())
