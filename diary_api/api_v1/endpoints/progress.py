from fastapi import APIRouter, Path as FastAPIPath

from diary_api import schemas
from diary_api.api_v1.dates import bad_request, parse_date_range
from diary_api.api_v1.deps import ProgressServiceDep
from diary_api.exceptions import ValidationError

router = APIRouter()

@router.get("/{start_date}/{end_date}", response_model=schemas.ProgressReport)
async def read_progress(
    service: ProgressServiceDep,
    start_date: str = FastAPIPath(..., description="First day (YYYY-MM-DD). Inclusive."),
    end_date: str = FastAPIPath(..., description="Last day (YYYY-MM-DD). Inclusive."),
):
    """
    Walks, workouts and junk food for every day in the range.
    Days without any entries are present with empty lists.
    """
    try:
        start, end = parse_date_range(start_date, end_date)
    except ValidationError as e:
        raise bad_request(e)
    return await service.compute_progress(start, end)
