# propreflect/transaction.py
# Copyright (C) 2026 the propreflect authors and contributors
# <see AUTHORS file>
#
# This module is part of propreflect and is released under
# the MIT License: https://www.opensource.org/licenses/mit-license.php

"""Connection lifecycle wrappers.

A :class:`.Transaction` hands out a DB-API connection and commits, rolls
back and closes it.  Errors raised by the driver are wrapped in
:class:`.exc.DataAccessError`, with the driver's exception available as
``orig``.

:class:`.DBAPITransaction` owns commit and rollback of its connection;
:class:`.ManagedTransaction` leaves them to an external container and only
(optionally) closes the connection.

"""

from __future__ import annotations

import abc
from typing import Any
from typing import Callable
from typing import NoReturn
from typing import Optional

from . import exc
from . import log


class Transaction(abc.ABC):
    """Wrap a database connection and its lifecycle.

    A :class:`.Transaction` may be used as a context manager; the
    transaction is rolled back if the block raises, and the connection is
    closed in all cases::

        with DBAPITransaction(creator=lambda: sqlite3.connect(path)) as trans:
            trans.get_connection().execute("insert into t values (1)")
            trans.commit()

    """

    @abc.abstractmethod
    def get_connection(self) -> Any:
        """Return the DB-API connection, opening it if needed."""

    @abc.abstractmethod
    def commit(self) -> None:
        ...

    @abc.abstractmethod
    def rollback(self) -> None:
        ...

    @abc.abstractmethod
    def close(self) -> None:
        ...

    @abc.abstractmethod
    def get_timeout(self) -> Optional[int]:
        """Return the statement timeout in seconds, if one is configured."""

    def __enter__(self) -> Transaction:
        return self

    def __exit__(self, type_: Any, value: Any, traceback: Any) -> None:
        try:
            if type_ is not None:
                self.rollback()
        finally:
            self.close()


def _raise_data_access_error(message: str, err: Exception) -> NoReturn:
    raise exc.DataAccessError(message, err) from err


@log.class_logger
class DBAPITransaction(Transaction):
    """A :class:`.Transaction` which commits and rolls back its own
    connection.

    :param connection: an already open DB-API connection.

    :param creator: a zero-argument callable returning a new DB-API
     connection, called the first time :meth:`.get_connection` is used.
     One of ``connection`` or ``creator`` is required.

    :param autocommit: when ``True``, the connection is assumed to be in
     driver level autocommit mode and :meth:`.commit` / :meth:`.rollback`
     do nothing.

    :param timeout: statement timeout in seconds reported by
     :meth:`.get_timeout`.

    """

    def __init__(
        self,
        connection: Any = None,
        *,
        creator: Optional[Callable[[], Any]] = None,
        autocommit: bool = False,
        timeout: Optional[int] = None,
    ):
        if connection is None and creator is None:
            raise exc.ArgumentError(
                "DBAPITransaction requires a connection or a creator"
            )
        self._connection = connection
        self._creator = creator
        self.autocommit = autocommit
        self.timeout = timeout

    def get_connection(self) -> Any:
        if self._connection is None:
            self._open_connection()
        return self._connection

    def _open_connection(self) -> None:
        assert self._creator is not None
        if self._should_log_debug():
            self.logger.debug("Opening DBAPI connection")
        try:
            self._connection = self._creator()
        except Exception as err:
            _raise_data_access_error("Error opening DBAPI connection.", err)

    def commit(self) -> None:
        if self._connection is not None and not self.autocommit:
            if self._should_log_debug():
                self.logger.debug(
                    "Committing DBAPI connection %r", self._connection
                )
            try:
                self._connection.commit()
            except Exception as err:
                _raise_data_access_error(
                    "Error committing DBAPI connection.", err
                )

    def rollback(self) -> None:
        if self._connection is not None and not self.autocommit:
            if self._should_log_debug():
                self.logger.debug(
                    "Rolling back DBAPI connection %r", self._connection
                )
            try:
                self._connection.rollback()
            except Exception as err:
                _raise_data_access_error(
                    "Error rolling back DBAPI connection.", err
                )

    def close(self) -> None:
        if self._connection is not None:
            if self._should_log_debug():
                self.logger.debug(
                    "Closing DBAPI connection %r", self._connection
                )
            try:
                self._connection.close()
            except Exception as err:
                _raise_data_access_error(
                    "Error closing DBAPI connection.", err
                )
            finally:
                self._connection = None

    def get_timeout(self) -> Optional[int]:
        return self.timeout


@log.class_logger
class ManagedTransaction(Transaction):
    """A :class:`.Transaction` whose commit and rollback are handled by an
    external container.

    :meth:`.commit` and :meth:`.rollback` do nothing; :meth:`.close`
    closes the connection only when ``close_connection`` is ``True``.

    """

    def __init__(
        self,
        connection: Any = None,
        *,
        creator: Optional[Callable[[], Any]] = None,
        close_connection: bool = True,
        timeout: Optional[int] = None,
    ):
        if connection is None and creator is None:
            raise exc.ArgumentError(
                "ManagedTransaction requires a connection or a creator"
            )
        self._connection = connection
        self._creator = creator
        self.close_connection = close_connection
        self.timeout = timeout

    def get_connection(self) -> Any:
        if self._connection is None:
            assert self._creator is not None
            if self._should_log_debug():
                self.logger.debug("Opening DBAPI connection")
            try:
                self._connection = self._creator()
            except Exception as err:
                _raise_data_access_error(
                    "Error opening DBAPI connection.", err
                )
        return self._connection

    def commit(self) -> None:
        pass

    def rollback(self) -> None:
        pass

    def close(self) -> None:
        if self.close_connection and self._connection is not None:
            if self._should_log_debug():
                self.logger.debug(
                    "Closing DBAPI connection %r", self._connection
                )
            try:
                self._connection.close()
            except Exception as err:
                _raise_data_access_error(
                    "Error closing DBAPI connection.", err
                )
            finally:
                self._connection = None

    def get_timeout(self) -> Optional[int]:
        return self.timeout
