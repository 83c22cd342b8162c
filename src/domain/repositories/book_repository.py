"""Book repository protocol."""

from typing import Protocol

from domain.entities.book import Book


class IBookRepository(Protocol):
    """Repository interface for Book entities."""

    async def get(self, id: int) -> Book | None:
        """Get a book by ID."""
        ...

    async def get_all(self) -> list[Book]:
        """Get all books, newest first."""
        ...

    async def create(self, book: Book) -> Book:
        """Create a new book."""
        ...

    async def update(self, book: Book) -> Book:
        """Update an existing book."""
        ...

    async def delete(self, id: int) -> bool:
        """Delete a book and return success status."""
        ...
