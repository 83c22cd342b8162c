"""Book service layer with business logic."""

from typing import Callable, List, Optional

import structlog

from core.exceptions import BookNotFoundError
from domain.entities.book import Book
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.validation import optional_text, require_text

logger = structlog.get_logger()


class BookService:
    """Service layer for Book business logic."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def get_all(self) -> List[Book]:
        """Get all books, newest first."""
        async with self._uow_factory() as uow:
            return await uow.books.get_all()  # type: ignore[no-any-return]

    async def create(
        self,
        title: str,
        description: Optional[str] = None,
        cover_url: Optional[str] = None,
        portada_url: Optional[str] = None,
    ) -> Book:
        """Create a new book. A title is required."""
        book = Book(
            title=require_text(title, "title"),
            description=optional_text(description),
            cover_url=optional_text(cover_url),
            portada_url=optional_text(portada_url),
        )

        async with self._uow_factory() as uow:
            created = await uow.books.create(book)
            await uow.commit()

        logger.info("book_created", book_id=created.id)
        return created

    async def update(
        self,
        book_id: int,
        title: str,
        description: Optional[str] = None,
        cover_url: Optional[str] = None,
        portada_url: Optional[str] = None,
    ) -> Book:
        """Replace the editable fields of a book."""
        title = require_text(title, "title")
        async with self._uow_factory() as uow:
            book = await uow.books.get(book_id)
            if not book:
                raise BookNotFoundError(book_id)

            book.title = title
            book.description = optional_text(description)
            book.cover_url = optional_text(cover_url)
            book.portada_url = optional_text(portada_url)

            updated = await uow.books.update(book)
            await uow.commit()
            return updated

    async def delete(self, book_id: int) -> None:
        """Delete a book."""
        async with self._uow_factory() as uow:
            deleted = await uow.books.delete(book_id)
            if not deleted:
                raise BookNotFoundError(book_id)
            await uow.commit()

        logger.info("book_deleted", book_id=book_id)
