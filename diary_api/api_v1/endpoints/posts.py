from typing import List
from fastapi import APIRouter, HTTPException, status, Path as FastAPIPath

from diary_api import schemas
from diary_api.api_v1.dates import bad_request, parse_date
from diary_api.api_v1.deps import RepositoryDep
from diary_api.exceptions import ValidationError

router = APIRouter()

@router.get("", response_model=List[schemas.Post])
async def read_posts(repository: RepositoryDep):
    """
    List all posts.
    """
    return await repository.list_posts()

@router.get("/dates", response_model=List[str])
async def read_post_dates(repository: RepositoryDep):
    """
    List the distinct dates that have a post, newest first.
    """
    return await repository.list_post_dates()

@router.get("/{date_string}", response_model=schemas.Post)
async def read_post(
    repository: RepositoryDep,
    date_string: str = FastAPIPath(..., description="Date in YYYY-MM-DD format."),
):
    """
    Get the post published on a specific day.
    """
    try:
        post_date = parse_date(date_string)
    except ValidationError as e:
        raise bad_request(e)
    post = await repository.get_post_by_date(post_date.isoformat())
    if post is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found")
    return post
