"""Tests for the calendar event ledger."""
import sqlite3

import pytest

from nodian.errors import StoreError
from nodian.sqla import Event, add_event, delete_event, get_events


@pytest.fixture
def db(tmp_path):
    return str(tmp_path / 'ledger' / 'events.db')


class TestEvents:

    def test_add_and_get(self, db):
        add_event('Standup', 'daily sync', '2024-03-01', sqlite_path=db)
        events = get_events('2024-03-01', sqlite_path=db)
        assert len(events) == 1
        event = events[0]
        assert event.title == 'Standup'
        assert event.description == 'daily sync'
        assert event.date == '2024-03-01'
        assert get_events('2024-03-02', sqlite_path=db) == []

    def test_empty_store(self, db):
        """A fresh store is created on first use and has no events."""
        assert get_events('2024-03-01', sqlite_path=db) == []

    def test_ids_assigned(self, db):
        a = add_event('a', None, '2024-03-01', sqlite_path=db)
        b = add_event('a', None, '2024-03-01', sqlite_path=db)
        assert a.id != b.id
        events = get_events('2024-03-01', sqlite_path=db)
        assert { e.id for e in events } == { a.id, b.id }
        assert all(e.description is None for e in events)

    def test_empty_title_allowed(self, db):
        event = add_event('', '', '2024-03-01', sqlite_path=db)
        assert [ e.id for e in get_events('2024-03-01', sqlite_path=db) ] == [event.id]

    def test_delete(self, db):
        keep = add_event('keep', None, '2024-03-01', sqlite_path=db)
        drop = add_event('drop', None, '2024-03-01', sqlite_path=db)
        delete_event(drop.id, sqlite_path=db)
        assert [ e.id for e in get_events('2024-03-01', sqlite_path=db) ] == [keep.id]

    def test_delete_missing_id(self, db):
        """Deleting an id that doesn't exist succeeds and changes nothing."""
        event = add_event('Standup', None, '2024-03-01', sqlite_path=db)
        missing = event.id + 100
        delete_event(missing, sqlite_path=db)
        delete_event(missing, sqlite_path=db)
        events = get_events('2024-03-01', sqlite_path=db)
        assert missing not in { e.id for e in events }
        assert [ e.id for e in events ] == [event.id]

    def test_store_recreated_between_calls(self, tmp_path):
        """Each call reopens the store, so deleting the file between calls is tolerated."""
        db = tmp_path / 'events.db'
        add_event('Standup', None, '2024-03-01', sqlite_path=str(db))
        db.unlink()
        assert get_events('2024-03-01', sqlite_path=str(db)) == []
        add_event('Retro', None, '2024-03-01', sqlite_path=str(db))
        assert [ e.title for e in get_events('2024-03-01', sqlite_path=str(db)) ] == ['Retro']

    def test_existing_table(self, tmp_path):
        """An events table created outside this package is reused as-is."""
        db = str(tmp_path / 'events.db')
        conn = sqlite3.connect(db)
        conn.execute('''
            CREATE TABLE events (
                id INTEGER PRIMARY KEY,
                title TEXT NOT NULL,
                description TEXT,
                date TEXT NOT NULL
            )
        ''')
        conn.execute(
            'INSERT INTO events (title, description, date) VALUES (?, ?, ?)',
            ('Legacy', 'from before', '2024-03-01'),
        )
        conn.commit()
        conn.close()

        add_event('New', None, '2024-03-01', sqlite_path=db)
        assert { e.title for e in get_events('2024-03-01', sqlite_path=db) } == {'Legacy', 'New'}

    def test_default_path(self, tmp_path, monkeypatch):
        db = tmp_path / 'env.db'
        monkeypatch.setenv('NODIAN_DB', str(db))
        event = Event.add('Standup', None, '2024-03-01')
        assert db.exists()
        assert [ e.id for e in Event.on('2024-03-01') ] == [event.id]

    def test_path_with_question_mark(self, tmp_path):
        """The ledger path is used verbatim, even when it looks like a URL query."""
        db = tmp_path / 'a?b' / 'events.db'
        add_event('Standup', None, '2024-03-01', sqlite_path=str(db))
        assert db.exists()
        assert not (tmp_path / 'a').exists()
        assert [ e.title for e in get_events('2024-03-01', sqlite_path=str(db)) ] == ['Standup']

    def test_store_error(self, tmp_path):
        """A path that can't be opened as a SQLite file surfaces as StoreError."""
        with pytest.raises(StoreError):
            get_events('2024-03-01', sqlite_path=str(tmp_path))
