from typing import Annotated

from fastapi import Depends, Request

from diary_api.core.database import Database
from diary_api.repositories.documents import DocumentRepository
from diary_api.services.progress import ProgressService


def get_database(request: Request) -> Database:
    """The shared handle opened by the application lifespan."""
    return request.app.state.database


def get_repository(database: Annotated[Database, Depends(get_database)]) -> DocumentRepository:
    return DocumentRepository(database.session_factory)


def get_progress_service(repository: Annotated[DocumentRepository, Depends(get_repository)]) -> ProgressService:
    return ProgressService(repository)


RepositoryDep = Annotated[DocumentRepository, Depends(get_repository)]
ProgressServiceDep = Annotated[ProgressService, Depends(get_progress_service)]
