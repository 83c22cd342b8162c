"""Book management API routes."""

from fastapi import APIRouter, Depends, Request, status

from api.dependencies.auth import CurrentUser
from api.v1.dependencies import get_book_service
from api.v1.schemas.book import (
    BookDetailResponse,
    BookListResponse,
    BookResponse,
    BookWrite,
)
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.services.book_service import BookService

router = APIRouter(prefix="/books", tags=["books"])


@router.get(
    "",
    response_model=BookListResponse,
    summary="List books",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_books(
    request: Request,
    user: CurrentUser,
    service: BookService = Depends(get_book_service),
) -> BookListResponse:
    """All books, newest first."""
    books = await service.get_all()
    return BookListResponse(data=[BookResponse.model_validate(b) for b in books])


@router.post(
    "",
    response_model=BookDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a book",
    responses={
        201: {"description": "Book created successfully"},
        400: {"description": "Title is blank"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def create_book(
    request: Request,
    body: BookWrite,
    user: CurrentUser,
    service: BookService = Depends(get_book_service),
) -> BookDetailResponse:
    book = await service.create(
        title=body.title,
        description=body.description,
        cover_url=body.cover_url,
        portada_url=body.portada_url,
    )
    return BookDetailResponse(data=BookResponse.model_validate(book))


@router.put(
    "/{book_id}",
    response_model=BookDetailResponse,
    summary="Replace a book",
    responses={
        200: {"description": "Book updated successfully"},
        400: {"description": "Title is blank"},
        404: {"description": "Book not found"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def update_book(
    request: Request,
    book_id: int,
    body: BookWrite,
    user: CurrentUser,
    service: BookService = Depends(get_book_service),
) -> BookDetailResponse:
    """Overwrite every editable field of a book."""
    book = await service.update(
        book_id=book_id,
        title=body.title,
        description=body.description,
        cover_url=body.cover_url,
        portada_url=body.portada_url,
    )
    return BookDetailResponse(data=BookResponse.model_validate(book))


@router.delete(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a book",
    responses={
        204: {"description": "Book deleted successfully"},
        404: {"description": "Book not found"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_book(
    request: Request,
    book_id: int,
    user: CurrentUser,
    service: BookService = Depends(get_book_service),
) -> None:
    await service.delete(book_id)
    return None
