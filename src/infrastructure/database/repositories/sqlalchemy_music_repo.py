"""SQLAlchemy implementation of Music repository."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.music import Music
from infrastructure.database.models import MusicModel


class SQLAlchemyMusicRepository:
    """SQLAlchemy implementation of IMusicRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: int) -> Music | None:
        model = await self._session.get(MusicModel, id)
        return self._to_entity(model) if model else None

    async def get_all(self) -> list[Music]:
        """Get all tracks, most recently added first."""
        stmt = select(MusicModel).order_by(MusicModel.id.desc())
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def create(self, music: Music) -> Music:
        model = MusicModel(
            title=music.title,
            author=music.author,
            category=music.category,
            music_url=music.music_url,
            cover_url=music.cover_url,
        )
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def update(self, music: Music) -> Music:
        model = await self._session.get(MusicModel, music.id)
        if not model:
            raise ValueError(f"Music {music.id} not found")

        model.title = music.title
        model.author = music.author
        model.category = music.category
        model.music_url = music.music_url
        model.cover_url = music.cover_url

        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, id: int) -> bool:
        model = await self._session.get(MusicModel, id)
        if not model:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True

    def _to_entity(self, model: MusicModel) -> Music:
        """Convert ORM model to domain entity."""
        return Music(
            id=model.id,
            title=model.title,
            author=model.author,
            category=model.category,
            music_url=model.music_url,
            cover_url=model.cover_url,
        )
