"""Unit tests for database migrator."""

from pathlib import Path

import aiosqlite
import pytest

from src.infrastructure.storage.sqlite.migrations.migrator import (
    REQUIRED_TABLES,
    MigrationInfo,
    create_backup,
    discover_migrations,
    get_current_version,
    get_migration_status,
    initialize_database,
    restore_backup,
    verify_schema_integrity,
)


class TestMigrationInfo:
    """Tests for MigrationInfo dataclass."""

    def test_from_file_parses_filename(self, tmp_path: Path):
        migration_file = tmp_path / "v001_initial_schema.sql"
        migration_file.write_text("-- Test migration\nSELECT 1;")

        info = MigrationInfo.from_file(migration_file)

        assert info.version == "001"
        assert info.name == "initial_schema"
        assert len(info.checksum) == 16

    def test_invalid_filename(self, tmp_path: Path):
        bad = tmp_path / "schema.sql"
        bad.write_text("SELECT 1;")

        with pytest.raises(ValueError, match="Invalid migration filename"):
            MigrationInfo.from_file(bad)


class TestDiscoverMigrations:
    """Tests for discover_migrations()."""

    def test_bundled_migrations(self):
        migrations = discover_migrations()

        assert migrations
        assert migrations[0].version == "001"

    def test_sorted_and_invalid_skipped(self, tmp_path: Path):
        (tmp_path / "v002_second.sql").write_text("SELECT 2;")
        (tmp_path / "v001_first.sql").write_text("SELECT 1;")
        (tmp_path / "vbad.sql").write_text("SELECT 0;")

        versions = [m.version for m in discover_migrations(tmp_path)]

        assert versions == ["001", "002"]


class TestInitializeDatabase:
    """Tests for initialize_database()."""

    async def test_creates_schema(self, temp_db_path: Path):
        results = await initialize_database(temp_db_path, create_backup_before=False)

        assert results
        assert all(r.success for r in results)
        async with aiosqlite.connect(temp_db_path) as conn:
            cursor = await conn.execute("SELECT name FROM sqlite_master WHERE type='table'")
            tables = {row[0] for row in await cursor.fetchall()}
            assert set(REQUIRED_TABLES) <= tables
            assert await get_current_version(conn) == discover_migrations()[-1].version

    async def test_second_run_is_noop(self, temp_db_path: Path):
        await initialize_database(temp_db_path, create_backup_before=False)

        assert await initialize_database(temp_db_path) == []

    async def test_backup_removed_after_success(self, initialized_db: Path):
        await initialize_database(initialized_db, create_backup_before=True)

        assert not list(initialized_db.parent.glob("*.backup_*"))


class TestMigrationStatus:
    """Tests for get_migration_status()."""

    async def test_missing_database(self, temp_db_path: Path):
        status = await get_migration_status(temp_db_path)

        assert status["exists"] is False
        assert status["pending_migrations"] == [m.version for m in discover_migrations()]

    async def test_migrated_database(self, initialized_db: Path):
        status = await get_migration_status(initialized_db)

        assert status["exists"] is True
        assert status["pending_migrations"] == []
        assert status["current_version"] == discover_migrations()[-1].version


class TestVerifySchemaIntegrity:
    """Tests for verify_schema_integrity()."""

    async def test_all_pass(self, initialized_db: Path):
        checks = await verify_schema_integrity(initialized_db)

        assert {c["check"] for c in checks} == {"foreign_keys", "integrity", "required_tables"}
        assert all(c["status"] == "PASS" for c in checks)

    async def test_missing_tables(self, temp_db_path: Path):
        async with aiosqlite.connect(temp_db_path) as conn:
            await conn.execute("CREATE TABLE unrelated (x INTEGER)")
            await conn.commit()

        checks = {c["check"]: c for c in await verify_schema_integrity(temp_db_path)}

        assert checks["required_tables"]["status"] == "FAIL"
        assert "quotes" in checks["required_tables"]["missing"]


class TestBackup:
    """Tests for create_backup() and restore_backup()."""

    def test_round_trip(self, tmp_path: Path):
        db = tmp_path / "data.db"
        db.write_bytes(b"original")

        backup = create_backup(db)
        db.write_bytes(b"changed")
        restore_backup(db, backup)

        assert db.read_bytes() == b"original"
