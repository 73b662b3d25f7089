from sqlalchemy import text


class TestSqliteConnection:

    async def test_foreign_keys_enabled(self, db):
        assert await db.scalar(text("PRAGMA foreign_keys")) == 1

    async def test_wal_journal(self, db):
        assert (await db.scalar(text("PRAGMA journal_mode"))).lower() == "wal"
