"""SQLAlchemy implementation of Book repository."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.book import Book
from infrastructure.database.models import BookModel


class SQLAlchemyBookRepository:
    """SQLAlchemy implementation of IBookRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: int) -> Book | None:
        """Get a book by ID."""
        model = await self._session.get(BookModel, id)
        return self._to_entity(model) if model else None

    async def get_all(self) -> list[Book]:
        """Get all books, newest first."""
        stmt = select(BookModel).order_by(BookModel.created_at.desc(), BookModel.id.desc())
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def create(self, book: Book) -> Book:
        """Create a new book."""
        model = BookModel(
            title=book.title,
            description=book.description,
            cover_url=book.cover_url,
            portada_url=book.portada_url,
            created_at=book.created_at,
        )
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def update(self, book: Book) -> Book:
        """Update an existing book."""
        model = await self._session.get(BookModel, book.id)
        if not model:
            raise ValueError(f"Book {book.id} not found")

        model.title = book.title
        model.description = book.description
        model.cover_url = book.cover_url
        model.portada_url = book.portada_url

        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, id: int) -> bool:
        """Delete a book."""
        model = await self._session.get(BookModel, id)
        if not model:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True

    def _to_entity(self, model: BookModel) -> Book:
        """Convert ORM model to domain entity."""
        return Book(
            id=model.id,
            title=model.title,
            description=model.description,
            cover_url=model.cover_url,
            portada_url=model.portada_url,
            created_at=model.created_at,
        )
