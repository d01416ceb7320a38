from typing import Optional

from sqlalchemy import Integer, String, delete, select
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base
from .db import connect


class Event(Base):
    """One calendar entry; rows are only ever inserted or deleted."""
    __tablename__ = "events"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, init=False)
    title: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    date: Mapped[str] = mapped_column(String, nullable=False)

    @classmethod
    def on(cls, date: str, sqlite_path: str | None = None) -> list['Event']:
        """All events whose date key equals ``date``, in store order."""
        with connect(sqlite_path) as session:
            return list(session.scalars(select(cls).where(cls.date == date)))

    @classmethod
    def add(cls, title: str, description: str | None, date: str, sqlite_path: str | None = None) -> 'Event':
        with connect(sqlite_path) as session:
            event = cls(title=title, description=description, date=date)
            session.add(event)
            session.commit()
            return event

    @classmethod
    def remove(cls, id: int, sqlite_path: str | None = None):
        """Delete the event with ``id``; a missing id is a no-op."""
        with connect(sqlite_path) as session:
            session.execute(delete(cls).where(cls.id == id))
            session.commit()


def get_events(date: str, sqlite_path: str | None = None) -> list[Event]:
    return Event.on(date, sqlite_path=sqlite_path)


def add_event(title: str, description: str | None, date: str, sqlite_path: str | None = None) -> Event:
    return Event.add(title, description, date, sqlite_path=sqlite_path)


def delete_event(id: int, sqlite_path: str | None = None):
    Event.remove(id, sqlite_path=sqlite_path)
