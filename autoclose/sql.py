"""
A small acquisition chain on top of peewee's SQLite database: a connection
prepares statements, a statement executes into a result set. Every link is a
closable resource and depends on the one it was created from, so the chain
has to be released in reverse order.
"""
from __future__ import annotations

from typing import Any, Iterator, List, Optional, Tuple

import peewee  # type: ignore

from autoclose.config import settings
from autoclose.errors import ResourceReleaseError, SqlError
from autoclose.scope import using


class Closable:
    name = "resource"

    def __init__(self, journal: Optional[List[str]] = None, fail_on_close: bool = False):
        self.journal = journal
        self.fail_on_close = fail_on_close
        self.closed = False

    def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        if self.journal is not None:
            self.journal.append(self.name)
        self._close()
        if self.fail_on_close:
            raise ResourceReleaseError(self.name)

    def _close(self) -> None:
        pass

    def _check_open(self) -> None:
        if self.closed:
            raise SqlError(f"{self.name} is closed")

    def __repr__(self) -> str:
        return f"<{type(self).__name__} closed={self.closed}>"


class Connection(Closable):
    name = "connection"

    def __init__(self, database: peewee.SqliteDatabase, **kwargs):
        super().__init__(**kwargs)
        self.database = database

    @classmethod
    def open(cls, path: Optional[str] = None, **kwargs) -> Connection:
        database = peewee.SqliteDatabase(path or settings.DEMO_DB)
        try:
            database.connect()
        except peewee.PeeweeException as e:
            raise SqlError(str(e)) from e
        return cls(database, **kwargs)

    def execute(self, sql: str, *params: Any) -> None:
        self._check_open()
        try:
            self.database.execute_sql(sql, params).close()
        except peewee.PeeweeException as e:
            raise SqlError(str(e)) from e

    def prepare(self, sql: str, fail_on_close: bool = False) -> Statement:
        self._check_open()
        return Statement(self, sql, journal=self.journal, fail_on_close=fail_on_close)

    def _close(self) -> None:
        self.database.close()


class Statement(Closable):
    name = "statement"

    def __init__(self, connection: Connection, sql: str, **kwargs):
        super().__init__(**kwargs)
        self.connection = connection
        self.sql = sql

    def execute(self, *params: Any, fail_on_close: bool = False) -> ResultSet:
        self._check_open()
        self.connection._check_open()
        try:
            cursor = self.connection.database.execute_sql(self.sql, params)
        except peewee.PeeweeException as e:
            raise SqlError(str(e)) from e
        return ResultSet(cursor, journal=self.journal, fail_on_close=fail_on_close)


class ResultSet(Closable):
    name = "result"

    def __init__(self, cursor, **kwargs):
        super().__init__(**kwargs)
        self.cursor = cursor

    def next(self) -> Optional[Tuple]:
        self._check_open()
        return self.cursor.fetchone()

    def fetchall(self) -> List[Tuple]:
        self._check_open()
        return self.cursor.fetchall()

    def __iter__(self) -> Iterator[Tuple]:
        row = self.next()
        while row is not None:
            yield row
            row = self.next()

    def _close(self) -> None:
        self.cursor.close()


def query(sql: str, *params: Any, path: Optional[str] = None) -> List[Tuple]:
    def work(rm):
        connection = rm.register(Connection.open(path))
        statement = rm.register(connection.prepare(sql))
        result = rm.register(statement.execute(*params))
        return result.fetchall()

    return using(work)
