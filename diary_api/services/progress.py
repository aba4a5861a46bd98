import asyncio
import logging
from datetime import date, datetime, timedelta
from typing import Dict, Protocol, Sequence, Union

from diary_api import schemas
from diary_api.exceptions import InvalidDateRangeError

logger = logging.getLogger(__name__)

# The only activity type counted as a walk; every other type is a workout.
WALK_TYPE = "Walk"

DateLike = Union[date, datetime]


class ProgressSource(Protocol):
    """The two reads the progress report needs from storage."""

    async def fetch_activities(self, start_date: date, end_date: date) -> Sequence[schemas.ActivityEntry]:
        ...

    async def fetch_junk_food(self, start_date: date, end_date: date) -> Sequence[schemas.JunkFoodEntry]:
        ...


def calendar_date(value: DateLike) -> date:
    """Drop any time of day and offset, keeping the calendar date as given."""
    if isinstance(value, datetime):
        return value.date()
    return value


def iter_days(start_date: date, end_date: date):
    """Yield every calendar day from start_date to end_date inclusive."""
    day = start_date
    while day <= end_date:
        yield day
        day += timedelta(days=1)


class ProgressService:
    """Builds day-by-day progress reports from activity and junk food entries."""

    def __init__(self, source: ProgressSource):
        self.source = source

    async def compute_progress(self, start_date: DateLike, end_date: DateLike) -> schemas.ProgressReport:
        """
        Bucket activities and junk food by day for the inclusive range.

        Every day in the range gets a key, empty days included. Entries keep
        the order the store returned them in.

        Raises:
            InvalidDateRangeError: If end_date is before start_date.
            StorageError: If either fetch fails. Nothing is returned then.
        """
        start, end = calendar_date(start_date), calendar_date(end_date)
        if end < start:
            raise InvalidDateRangeError()

        activities, junk_foods = await self._fetch_both(start, end)

        progress: Dict[str, schemas.DailyProgress] = {}
        for activity in activities:
            day = progress.setdefault(activity.date, schemas.DailyProgress())
            entry = schemas.ActivityResponse(kind=activity.kind, elapsed_seconds=activity.elapsed_seconds)
            if activity.kind == WALK_TYPE:
                day.walks.append(entry)
            else:
                day.workouts.append(entry)

        for junk_food in junk_foods:
            day = progress.setdefault(junk_food.date, schemas.DailyProgress())
            day.junk_foods.append(schemas.JunkFoodResponse(kind=junk_food.kind))

        report: schemas.ProgressReport = {}
        for day in iter_days(start, end):
            key = day.isoformat()
            report[key] = progress.pop(key) if key in progress else schemas.DailyProgress()
        if progress:
            logger.warning(f"Dropping entries dated outside {start} to {end}: {sorted(progress)}")

        logger.debug(
            f"Progress {start} to {end}: {len(activities)} activities, "
            f"{len(junk_foods)} junk foods over {len(report)} days"
        )
        return report

    async def _fetch_both(self, start: date, end: date):
        """
        Run both fetches concurrently. If either fails, or the caller is
        cancelled, the other fetch is cancelled and awaited before re-raising.
        """
        tasks = [
            asyncio.create_task(self.source.fetch_activities(start, end)),
            asyncio.create_task(self.source.fetch_junk_food(start, end)),
        ]
        try:
            activities, junk_foods = await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise
        return activities, junk_foods
