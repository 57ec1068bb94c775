from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, time
from typing import Callable
from zoneinfo import ZoneInfo

from app.application.utils.greeting import OUT_OF_HOURS_NOTE
from app.domain.entities.reply import InteractiveList, Reply


@dataclass(frozen=True)
class OpeningWindow:
    weekdays: frozenset[int]  # Monday == 0
    opens: time
    closes: time  # exclusive


DEFAULT_SCHEDULE: tuple[OpeningWindow, ...] = (
    OpeningWindow(weekdays=frozenset({0, 1, 2, 3}), opens=time(12, 0), closes=time(22, 0)),
    OpeningWindow(weekdays=frozenset({4, 5}), opens=time(12, 0), closes=time(23, 0)),
    OpeningWindow(weekdays=frozenset({6}), opens=time(12, 0), closes=time(20, 0)),
)


class BusinessHoursGate:
    def __init__(
        self,
        timezone: str,
        schedule: tuple[OpeningWindow, ...] = DEFAULT_SCHEDULE,
        note: str = OUT_OF_HOURS_NOTE,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._tz = _safe_timezone(timezone)
        self._schedule = schedule
        self._note = note
        self._clock = clock or (lambda: datetime.now(self._tz))

    def is_open(self, now: datetime | None = None) -> bool:
        current = now or self._clock()
        if current.tzinfo is None:
            current = current.replace(tzinfo=self._tz)
        local = current.astimezone(self._tz)
        local_time = local.time()
        for window in self._schedule:
            if local.weekday() in window.weekdays and window.opens <= local_time < window.closes:
                return True
        return False

    def annotate(self, reply: Reply, now: datetime | None = None) -> Reply:
        if self.is_open(now):
            return reply

        interactive = reply.interactive
        if interactive is not None:
            interactive = InteractiveList(
                body=f"{self._note}\n\n{interactive.body}",
                button=interactive.button,
                sections=interactive.sections,
                header=interactive.header,
            )
        return Reply(
            text=f"{self._note}\n\n{reply.text}",
            interactive=interactive,
            meta={**reply.meta, "out_of_hours": True},
        )


def _safe_timezone(name: str) -> ZoneInfo:
    try:
        return ZoneInfo(name)
    except Exception:
        return ZoneInfo("UTC")
