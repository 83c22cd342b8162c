"""Music service layer with business logic."""

from typing import Callable, List, Optional

import structlog

from core.exceptions import MusicNotFoundError
from domain.entities.music import Music
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.validation import optional_text, require_text

logger = structlog.get_logger()


class MusicService:
    """Service layer for the music catalogue."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def get_all(self) -> List[Music]:
        async with self._uow_factory() as uow:
            return await uow.music.get_all()  # type: ignore[no-any-return]

    async def create(
        self,
        title: str,
        author: Optional[str] = None,
        category: Optional[str] = None,
        music_url: Optional[str] = None,
        cover_url: Optional[str] = None,
    ) -> Music:
        """Add a track. A title is required."""
        music = Music(
            title=require_text(title, "title"),
            author=optional_text(author),
            category=optional_text(category),
            music_url=optional_text(music_url),
            cover_url=optional_text(cover_url),
        )

        async with self._uow_factory() as uow:
            created = await uow.music.create(music)
            await uow.commit()

        logger.info("music_created", music_id=created.id)
        return created

    async def update(
        self,
        music_id: int,
        title: str,
        author: Optional[str] = None,
        category: Optional[str] = None,
        music_url: Optional[str] = None,
        cover_url: Optional[str] = None,
    ) -> Music:
        title = require_text(title, "title")
        async with self._uow_factory() as uow:
            music = await uow.music.get(music_id)
            if not music:
                raise MusicNotFoundError(music_id)

            music.title = title
            music.author = optional_text(author)
            music.category = optional_text(category)
            music.music_url = optional_text(music_url)
            music.cover_url = optional_text(cover_url)

            updated = await uow.music.update(music)
            await uow.commit()
            return updated

    async def delete(self, music_id: int) -> None:
        async with self._uow_factory() as uow:
            deleted = await uow.music.delete(music_id)
            if not deleted:
                raise MusicNotFoundError(music_id)
            await uow.commit()

        logger.info("music_deleted", music_id=music_id)
