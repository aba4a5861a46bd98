from typing import List
from fastapi import APIRouter, Path as FastAPIPath

from diary_api import schemas
from diary_api.api_v1.dates import bad_request, parse_date_range
from diary_api.api_v1.deps import RepositoryDep
from diary_api.exceptions import ValidationError

router = APIRouter()

@router.get("/{start_date}/{end_date}", response_model=List[schemas.ActivityEntry])
async def read_activities(
    repository: RepositoryDep,
    start_date: str = FastAPIPath(..., description="First day (YYYY-MM-DD). Inclusive."),
    end_date: str = FastAPIPath(..., description="Last day (YYYY-MM-DD). Inclusive."),
):
    """
    List recorded activities between two days.
    """
    try:
        start, end = parse_date_range(start_date, end_date)
    except ValidationError as e:
        raise bad_request(e)
    return await repository.fetch_activities(start, end)
