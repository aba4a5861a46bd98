import logging
from datetime import date
from typing import Any, Dict, List, Optional, Sequence, Type, TypeVar

import pydantic
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from diary_api import schemas
from diary_api.core.models import Category, Document
from diary_api.exceptions import StorageError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=pydantic.BaseModel)


def decode_document(model: Type[ModelT], document: Document) -> ModelT:
    """
    Validate a stored document against a schema.

    The indexed date column wins over any date kept in the body.

    Raises:
        StorageError: If the document does not fit the schema (e.g. no date).
    """
    payload: Dict[str, Any] = dict(document.body or {})
    payload["date"] = document.date
    try:
        return model.model_validate(payload)
    except pydantic.ValidationError as e:
        raise StorageError(
            f"Malformed {document.category} document {document.id!r}: {e.error_count()} validation error(s)"
        ) from e


class DocumentRepository:
    """
    Read-only access to the shared document collection.

    Every call opens its own session so calls may run concurrently.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    async def fetch_activities(self, start_date: date, end_date: date) -> List[schemas.ActivityEntry]:
        """Activity entries dated within [start_date, end_date], in store order."""
        documents = await self._in_date_range(Category.ACTIVITY, start_date, end_date)
        return [decode_document(schemas.ActivityEntry, doc) for doc in documents]

    async def fetch_junk_food(self, start_date: date, end_date: date) -> List[schemas.JunkFoodEntry]:
        """Junk food entries dated within [start_date, end_date], in store order."""
        documents = await self._in_date_range(Category.JUNK_FOOD, start_date, end_date)
        return [decode_document(schemas.JunkFoodEntry, doc) for doc in documents]

    async def list_posts(self) -> List[schemas.Post]:
        query = select(Document).where(Document.category == Category.POST.value)
        documents = await self._scalars(query)
        return [decode_document(schemas.Post, doc) for doc in documents]

    async def get_post_by_date(self, post_date: str) -> Optional[schemas.Post]:
        """First post whose date equals post_date (YYYY-MM-DD), or None."""
        query = (
            select(Document)
            .where(Document.category == Category.POST.value)
            .where(Document.date == post_date)
            .limit(1)
        )
        documents = await self._scalars(query)
        if not documents:
            return None
        return decode_document(schemas.Post, documents[0])

    async def list_post_dates(self) -> List[str]:
        """Distinct post dates, newest first."""
        query = (
            select(Document.date)
            .where(Document.category == Category.POST.value)
            .distinct()
            .order_by(Document.date.desc())
        )
        dates = await self._scalars(query)
        if any(d is None for d in dates):
            raise StorageError("Malformed post document: missing date")
        return list(dates)

    async def _in_date_range(self, category: Category, start_date: date, end_date: date) -> Sequence[Document]:
        logger.debug(f"Querying {category.value} documents from {start_date} to {end_date}")
        query = (
            select(Document)
            .where(Document.category == category.value)
            .where(Document.date >= start_date.isoformat())
            .where(Document.date <= end_date.isoformat())
        )
        return await self._scalars(query)

    async def _scalars(self, query) -> Sequence[Any]:
        try:
            async with self.session_factory() as session:
                result = await session.execute(query)
                return result.scalars().all()
        except SQLAlchemyError as e:
            raise StorageError("Document store query failed") from e
