"""SQLAlchemy ORM models.

Table and column names follow the existing Supabase schema, which mixes
English and Spanish; Python attribute names are English throughout.
"""

from datetime import date, datetime
from uuid import UUID

from sqlalchemy import Date, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.dialects.postgresql import UUID as PG_UUID
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class ProfileModel(Base):
    """Member profile model (synced from Supabase auth)."""

    __tablename__ = "profiles"

    user_id: Mapped[UUID] = mapped_column(
        PG_UUID(as_uuid=True),
        primary_key=True,
    )
    name: Mapped[str | None] = mapped_column(String(100))
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    avatar_url: Mapped[str | None] = mapped_column(String(500))
    pin: Mapped[str | None] = mapped_column(String(6))
    description: Mapped[str | None] = mapped_column(Text)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
    )

    owner_info: Mapped["OwnerInfoModel | None"] = relationship(
        "OwnerInfoModel",
        back_populates="profile",
        uselist=False,
    )


class OwnerInfoModel(Base):
    """Personal information provided once per member."""

    __tablename__ = "ownerinfo"

    owner_id: Mapped[UUID] = mapped_column(
        "uuid",
        PG_UUID(as_uuid=True),
        ForeignKey("profiles.user_id", ondelete="CASCADE"),
        primary_key=True,
    )
    full_name: Mapped[str] = mapped_column("nombresyapellidos", String(200), nullable=False)
    # Null on legacy rows that only carry ``edad``
    birth_date: Mapped[date | None] = mapped_column("fechadenacimiento", Date)
    nationality: Mapped[str] = mapped_column("nacionalidad", String(100), nullable=False)
    stored_age: Mapped[int | None] = mapped_column("edad", Integer)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)

    profile: Mapped["ProfileModel"] = relationship(
        "ProfileModel",
        back_populates="owner_info",
    )


class EventModel(Base):
    """Community event model."""

    __tablename__ = "events"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    event_date: Mapped[date] = mapped_column("date", Date, nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(Text)
    winner: Mapped[str | None] = mapped_column(String(200))
    cover: Mapped[str | None] = mapped_column(String(500))


class BookModel(Base):
    """Library book model."""

    __tablename__ = "books"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(300), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    cover_url: Mapped[str | None] = mapped_column(String(500))
    portada_url: Mapped[str | None] = mapped_column(String(500))
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, index=True)


class MusicModel(Base):
    """Music track model."""

    __tablename__ = "musicas"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column("titulo", String(300), nullable=False)
    author: Mapped[str | None] = mapped_column("autor", String(200))
    category: Mapped[str | None] = mapped_column("categoria", String(100))
    music_url: Mapped[str | None] = mapped_column("musica_url", String(500))
    cover_url: Mapped[str | None] = mapped_column("portada_url", String(500))
