"""Dependency injection factories for API v1."""

from functools import lru_cache
from typing import Callable

from fastapi import Depends

from api.dependencies.auth import get_optional_user
from core.config import settings
from domain.services.book_service import BookService
from domain.services.dates import local_now
from domain.services.event_service import EventService
from domain.services.member_service import MemberService
from domain.services.music_service import MusicService
from domain.services.profile_gate import OwnerInfoStore, ProfileGate
from domain.services.user_admin_service import UserAdminService
from infrastructure.auth.provider import TokenUser
from infrastructure.database.owner_info_store import UnitOfWorkOwnerInfoStore
from infrastructure.database.session import async_session_factory
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork


def get_uow_factory() -> Callable[[], SQLAlchemyUnitOfWork]:
    """Factory for creating Unit of Work instances."""

    def factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(async_session_factory)

    return factory


@lru_cache
def get_owner_info_store() -> OwnerInfoStore:
    """Get the store the profile gate reads and writes through."""
    return UnitOfWorkOwnerInfoStore(get_uow_factory())


@lru_cache
def get_member_service() -> MemberService:
    """Get Member service instance."""
    return MemberService(get_uow_factory())


@lru_cache
def get_event_service() -> EventService:
    """Get Event service instance."""
    return EventService(get_uow_factory())


@lru_cache
def get_book_service() -> BookService:
    """Get Book service instance."""
    return BookService(get_uow_factory())


@lru_cache
def get_music_service() -> MusicService:
    """Get Music service instance."""
    return MusicService(get_uow_factory())


@lru_cache
def get_user_admin_service() -> UserAdminService:
    """Get UserAdmin service instance."""
    return UserAdminService(get_uow_factory())


def get_profile_gate(
    user: TokenUser | None = Depends(get_optional_user),
    store: OwnerInfoStore = Depends(get_owner_info_store),
) -> ProfileGate:
    """A fresh gate per request, scoped to the signed-in member.

    A missing or invalid token yields a gate without an owner, which
    settles in the ERROR state when loaded.
    """
    return ProfileGate(
        owner_id=user.id if user else None,
        store=store,
        cutoff_year=settings.minimum_birth_year_cutoff,
        now=local_now,
    )
