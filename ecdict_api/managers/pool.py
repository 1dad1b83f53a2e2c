from __future__ import annotations
import asyncio
import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, List

import aiosqlite

from ..errors import PoolClosed

logger = logging.getLogger(__name__)

def read_only_uri(path: str) -> str:
    return f"{Path(path).absolute().as_uri()}?mode=ro"

class ConnectionPool:
    """Bounded set of reusable read-only connections to the dictionary store.

    At most ``max_connections`` connections are checked out at once; callers
    beyond that wait in ``acquire()`` without blocking the event loop.
    Connections are opened lazily and kept idle for reuse after release.
    """

    def __init__(self, path: str, max_connections: int = 16):
        if max_connections < 1:
            raise ValueError('max_connections must be at least 1')
        self.path = path
        self.max_connections = max_connections
        self._uri = read_only_uri(path)
        self._slots = asyncio.Semaphore(max_connections)
        self._idle: List[aiosqlite.Connection] = []
        self._opened = 0
        self._closed = False

    @property
    def size(self) -> int:
        """Number of connections currently open, idle or checked out."""
        return self._opened

    @property
    def idle(self) -> int:
        return len(self._idle)

    async def open(self) -> None:
        # Fails fast when the store is missing or unreadable
        conn = await self._connect()
        self._idle.append(conn)
        logger.info(f"Opened dictionary store {self.path} read-only (pool size {self.max_connections})")

    async def _connect(self) -> aiosqlite.Connection:
        conn = await aiosqlite.connect(self._uri, uri=True)
        try:
            conn.row_factory = aiosqlite.Row
            async with conn.execute('PRAGMA query_only = ON'):
                pass
        except BaseException:
            await conn.close()
            raise
        self._opened += 1
        return conn

    @asynccontextmanager
    async def acquire(self) -> AsyncIterator[aiosqlite.Connection]:
        if self._closed:
            raise PoolClosed('connection pool is closed')
        async with self._slots:
            if self._closed:
                raise PoolClosed('connection pool is closed')
            conn = self._idle.pop() if self._idle else await self._connect()
            try:
                yield conn
            finally:
                if self._closed:
                    self._opened -= 1
                    await conn.close()
                else:
                    self._idle.append(conn)

    async def close(self) -> None:
        self._closed = True
        while self._idle:
            conn = self._idle.pop()
            self._opened -= 1
            await conn.close()
        logger.info(f"Closed dictionary store {self.path}")
