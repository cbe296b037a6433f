"""
Async SQLite connection pool with aiosqlite.

Stores borrow connections through `get_connection` for reads and
`get_transaction` for writes. Pool exhaustion and SQLite operational
failures surface as `DatabaseError` so the API reports them with the
DATABASE_ERROR code.
"""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

import aiosqlite

from src.config import get_logger, get_settings
from src.core.exceptions import DatabaseError

logger = get_logger(__name__)


class ConnectionPool:
    """Fixed-size pool of aiosqlite connections to one database file."""

    def __init__(
        self,
        db_path: Path,
        pool_size: int = 5,
        busy_timeout: int = 30000,
        acquire_timeout: float = 10.0,
    ):
        self.db_path = db_path
        self.pool_size = pool_size
        self.busy_timeout = busy_timeout
        self.acquire_timeout = acquire_timeout

        self._pool: asyncio.Queue[aiosqlite.Connection] = asyncio.Queue(maxsize=pool_size)
        self._connections: list[aiosqlite.Connection] = []
        self._initialized = False
        self._lock = asyncio.Lock()

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def idle_connections(self) -> int:
        """Connections currently waiting in the pool."""
        return self._pool.qsize()

    async def initialize(self) -> None:
        """Open all connections. Safe to call more than once."""
        async with self._lock:
            if self._initialized:
                return

            self.db_path.parent.mkdir(parents=True, exist_ok=True)

            for _ in range(self.pool_size):
                conn = await self._open()
                self._connections.append(conn)
                await self._pool.put(conn)

            self._initialized = True
            logger.info(
                "connection_pool_initialized",
                db_path=str(self.db_path),
                pool_size=self.pool_size,
            )

    async def _open(self) -> aiosqlite.Connection:
        conn = await aiosqlite.connect(self.db_path)
        await conn.execute("PRAGMA journal_mode=WAL")
        await conn.execute("PRAGMA synchronous=NORMAL")
        await conn.execute(f"PRAGMA busy_timeout={self.busy_timeout}")
        # quote_items and inventory_units cascade on item delete
        await conn.execute("PRAGMA foreign_keys=ON")
        conn.row_factory = aiosqlite.Row
        return conn

    @asynccontextmanager
    async def acquire(self) -> AsyncIterator[aiosqlite.Connection]:
        """
        Borrow a connection and return it to the pool afterwards.

        Raises DatabaseError when no connection frees up within
        ``acquire_timeout`` seconds.
        """
        if not self._initialized:
            await self.initialize()

        try:
            conn = await asyncio.wait_for(self._pool.get(), timeout=self.acquire_timeout)
        except TimeoutError:
            logger.warning(
                "connection_pool_exhausted",
                pool_size=self.pool_size,
                timeout_s=self.acquire_timeout,
            )
            raise DatabaseError(
                "acquire", f"no free connection after {self.acquire_timeout}s"
            ) from None
        try:
            yield conn
        finally:
            await self._pool.put(conn)

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[aiosqlite.Connection]:
        """
        Borrow a connection; commit on success, roll back on error.

        Constraint violations propagate as aiosqlite.IntegrityError.
        Locked or broken databases raise DatabaseError.
        """
        async with self.acquire() as conn:
            try:
                yield conn
                await conn.commit()
            except aiosqlite.OperationalError as e:
                await conn.rollback()
                logger.error("transaction_failed", error=str(e))
                raise DatabaseError("transaction", str(e)) from e
            except Exception:
                await conn.rollback()
                raise

    async def close(self) -> None:
        """Close every connection and reset the pool."""
        async with self._lock:
            for conn in self._connections:
                await conn.close()
            self._connections.clear()
            self._pool = asyncio.Queue(maxsize=self.pool_size)
            self._initialized = False
            logger.info("connection_pool_closed")


_pool: ConnectionPool | None = None


async def get_pool() -> ConnectionPool:
    """Get or create the global connection pool."""
    global _pool
    if _pool is None:
        settings = get_settings()
        _pool = ConnectionPool(
            db_path=settings.storage.db_path,
            pool_size=settings.storage.pool_size,
            busy_timeout=settings.storage.busy_timeout,
            acquire_timeout=settings.storage.acquire_timeout,
        )
        await _pool.initialize()
    return _pool


async def close_pool() -> None:
    """Close the global connection pool."""
    global _pool
    if _pool is not None:
        await _pool.close()
        _pool = None


@asynccontextmanager
async def get_connection() -> AsyncIterator[aiosqlite.Connection]:
    """Borrow a connection from the global pool."""
    pool = await get_pool()
    async with pool.acquire() as conn:
        yield conn


@asynccontextmanager
async def get_transaction() -> AsyncIterator[aiosqlite.Connection]:
    """Borrow a connection from the global pool inside a transaction."""
    pool = await get_pool()
    async with pool.transaction() as conn:
        yield conn
