"""Loading the connection settings from a dotenv file and opening a connection."""

from __future__ import annotations

import os
import sqlite3
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from dotenv import dotenv_values

DRIVER_ENV = "DB_DRIVER_NAME"
DSN_ENV = "DB_DSN"


class ConfigError(Exception):
    """The configuration file could not be loaded."""


class DbError(Exception):
    """A connection to the database could not be established."""


@dataclass(frozen=True)
class DbConfig:
    """Driver name and data source name of a database."""

    driver_name: str = ""
    dsn: str = ""


def _connect_sqlite(dsn: str) -> sqlite3.Connection:
    connection = sqlite3.connect(dsn, isolation_level=None)
    try:
        connection.execute("SELECT 1").fetchone()
    except sqlite3.Error:
        connection.close()
        raise
    return connection


_DRIVERS: dict[str, Callable[[str], Any]] = {
    "sqlite3": _connect_sqlite,
    "sqlite": _connect_sqlite,
}


def load(path: str | os.PathLike[str]) -> DbConfig:
    """Read a dotenv file into the environment and return the database settings.

    Variables already present in the environment are left untouched.
    Raises OSError when the file cannot be read.
    """
    with open(path, encoding="utf-8") as stream:
        values = dotenv_values(stream=stream)
    for name, value in values.items():
        if value is not None and name not in os.environ:
            os.environ[name] = value
    return DbConfig(
        driver_name=os.environ.get(DRIVER_ENV, ""),
        dsn=os.environ.get(DSN_ENV, ""),
    )


def new_db(path: str | os.PathLike[str]) -> Any:
    """Load the settings from ``path`` and return an open, verified connection."""
    try:
        cfg = load(path)
    except (OSError, ValueError) as exc:
        raise ConfigError(f"failed to load config from {path}") from exc

    connector = _DRIVERS.get(cfg.driver_name)
    if connector is None:
        raise DbError(
            f'failed to connect to sql: unknown driver "{cfg.driver_name}"'
        )
    try:
        return connector(cfg.dsn)
    except sqlite3.Error as exc:
        raise DbError(f"failed to connect to {exc}") from exc