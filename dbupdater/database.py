"""Database collaborator receiving the rows parsed by the update_database tool.

No database driver is used here: the default implementation only logs what
would be written, so that a real driver can be plugged in with the same interface.
"""

import json
import logging
import typing as t
from dataclasses import dataclass, field

from dbupdater.connection import ConnectionDescriptor
from dbupdater.tabular import RowRecord


logger = logging.getLogger(__name__)



# UPDATE REQUESTS
# ===============


@dataclass(frozen=True)
class DatabaseUpdate:
    """Dataclass to hold everything a database writer needs to update a table."""

    databaseType: str                   # PostgreSQL, MySQL, MongoDB, SQLite...
    connection: ConnectionDescriptor    # Parsed connection string
    tableName: str                      # Table (or collection) to update
    rows: list[RowRecord] = field(default_factory=list)


class DatabaseWriter(t.Protocol):
    """Anything able to write parsed rows to a database.
    Write returns a short report; failures are raised as exceptions.
    """

    def Write(self, update: DatabaseUpdate) -> str: ...



# LOGGING WRITER
# ==============


class LoggingDatabase:
    """Database writer that logs the update instead of performing it."""

    def Write(self, update: DatabaseUpdate) -> str:
        logger.info("Updating database of type %s with connection details %s and table name %s: %d rows",
            update.databaseType, json.dumps(update.connection), update.tableName, len(update.rows))
        logger.debug("Rows for table %s: %s", update.tableName, update.rows)

        return f"{len(update.rows)} rows written to table '{update.tableName}'."
