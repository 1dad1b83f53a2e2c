from __future__ import annotations
import logging
import sqlite3
from typing import List

from pydantic import ValidationError

from .errors import NotFound, StoreFailure
from .managers.pool import ConnectionPool
from .schemas import Word

logger = logging.getLogger(__name__)

FUZZY_LIMIT = 10

# Column list is fixed; user input only ever travels as a bind parameter.
_COLUMNS = (
    "ifnull(word, '') as word, ifnull(definition, '') as definition, "
    "ifnull(translation, '') as translation, ifnull(phonetic, '') as phonetic"
)
EXACT_SQL = f"select {_COLUMNS} from stardict where word = ?"
FUZZY_SQL = f"select {_COLUMNS} from stardict where word like ? limit ?"

def to_like_pattern(query: str) -> str:
    # '%' and '_' already in the query keep their LIKE meaning
    return query.replace('.', '%')

def _to_word(row) -> Word:
    return Word(
        word=row['word'],
        definition=row['definition'],
        translation=row['translation'],
        phonetic=row['phonetic'],
    )

class DictionaryService:
    def __init__(self, pool: ConnectionPool):
        self.pool = pool

    async def exact(self, word: str) -> Word:
        logger.debug(f"Exact lookup for {word!r}")
        try:
            async with self.pool.acquire() as conn:
                async with conn.execute(EXACT_SQL, (word,)) as cursor:
                    row = await cursor.fetchone()
            if row is None:
                raise NotFound(word)
            return _to_word(row)
        except (sqlite3.Error, ValidationError) as e:
            logger.warning(f"Exact lookup for {word!r} failed: {e}")
            raise StoreFailure(e) from e

    async def fuzzy(self, query: str) -> List[Word]:
        pattern = to_like_pattern(query)
        logger.debug(f"Fuzzy lookup for {query!r} as pattern {pattern!r}")
        try:
            async with self.pool.acquire() as conn:
                async with conn.execute(FUZZY_SQL, (pattern, FUZZY_LIMIT)) as cursor:
                    rows = await cursor.fetchall()
            return [_to_word(r) for r in rows]
        except (sqlite3.Error, ValidationError) as e:
            logger.warning(f"Fuzzy lookup for {query!r} failed: {e}")
            raise StoreFailure(e) from e
