import pytest
import pydantic

from diary_api import schemas


def test_progress_entries_are_immutable():
    entry = schemas.ActivityResponse(type="Walk", elapsedTime=60)
    with pytest.raises(pydantic.ValidationError):
        entry.kind = "Run"


def test_daily_progress_buckets_fill_in_place_and_dump_by_alias():
    day = schemas.DailyProgress()
    day.junk_foods.append(schemas.JunkFoodResponse(kind="Chips"))

    assert day.model_dump(by_alias=True) == {"walks": [], "workouts": [], "junkFoods": [{"type": "Chips"}]}
    assert schemas.DailyProgress().junk_foods == []
