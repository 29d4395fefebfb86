"""Cron-scheduled status polling for a single server."""

from __future__ import annotations

import asyncio
from datetime import datetime
from typing import Callable, Optional, Union

from croniter import croniter
from croniter.croniter import CroniterBadCronError

from .address import resolve
from .errors import JkaQueryError
from .logging_config import get_logger
from .models import StatusDocument
from .queries import get_status

MAX_SLEEP_INTERVAL_SECONDS = 30

PollResult = Union[StatusDocument, JkaQueryError]


class CronSchedule:
    """Cron schedule helper backed by :mod:`croniter`."""

    def __init__(self, expression: str) -> None:
        self._expression = expression
        self._validate_expression()

    def _validate_expression(self) -> None:
        """Eagerly validate cron syntax so we fail fast on start-up."""

        try:
            croniter(self._expression, datetime.now())
        except CroniterBadCronError as exc:
            raise ValueError(str(exc)) from exc

    def next_run(self, reference: datetime) -> datetime:
        """Return the next scheduled time strictly after ``reference``."""

        try:
            iterator = croniter(
                self._expression,
                reference,
                ret_type=datetime,
            )
            return iterator.get_next(datetime)
        except CroniterBadCronError as exc:  # pragma: no cover
            raise ValueError(str(exc)) from exc


async def _sleep(seconds: float) -> None:
    await asyncio.sleep(seconds)


def describe(document: StatusDocument) -> str:
    """One-line summary used in monitor log output."""
    gametype = document.gametype
    maxclients = document.cvars.get('sv_maxclients') or '?'
    return (
        f"{document.hostname or '?'} | map={document.cvars.get('mapname') or '?'} | "
        f"gametype={gametype.label if gametype is not None else '?'} | "
        f"players={len(document.players)}/{maxclients}"
    )


async def run_monitor(
    server: str,
    cron_expression: str,
    timeout: Optional[float] = None,
    max_polls: Optional[int] = None,
    on_result: Optional[Callable[[str, PollResult], None]] = None,
) -> int:
    """
    Poll ``getstatus`` on every cron tick.

    Query failures are logged and reported through ``on_result``; the
    monitor keeps running until ``max_polls`` polls have been made (forever
    when None).

    Returns:
        Number of polls performed

    Raises:
        ValueError: If the cron expression is invalid
        FormatError, PortRangeError: If the server address is invalid
    """
    logger = get_logger(__name__)
    resolve(server)
    schedule = CronSchedule(cron_expression)
    logger.info("Status monitor active for %s (cron='%s')", server, cron_expression)

    polls = 0
    while max_polls is None or polls < max_polls:
        next_run = schedule.next_run(datetime.now())
        logger.debug("Next status poll at %s", next_run.strftime("%Y-%m-%d %H:%M:%S"))

        while True:
            delta = (next_run - datetime.now()).total_seconds()
            if delta <= 0:
                break
            await _sleep(min(delta, MAX_SLEEP_INTERVAL_SECONDS))

        result: PollResult
        try:
            result = await get_status(server, timeout)
            logger.info("%s: %s", server, describe(result))
        except JkaQueryError as exc:
            logger.warning("%s: status query failed (%s): %s", server, exc.kind.value, exc.detail)
            result = exc
        polls += 1
        if on_result is not None:
            on_result(server, result)

    return polls


__all__ = ["CronSchedule", "describe", "run_monitor"]
