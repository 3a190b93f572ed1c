"""Server settings, read from environment variables."""

import os
import typing as t
from dataclasses import dataclass


SERVER_NAME = "database-updater"
SERVER_VERSION = "0.1.0"

INSTRUCTIONS = """
This server exposes notes as resources (note:///{id}) and lets you create new ones.
Use the summarize_notes prompt to get a summary of all notes.

The update_database tool reads a CSV or Excel file (first sheet only, first row as header)
and sends its rows to the database described by the connection string.
Connection strings are either MongoDB URLs or "key=value;key=value" pairs.
"""


@dataclass(frozen=True)
class Settings:
    """Dataclass to hold the server configuration."""

    logLevel: str = "INFO"              # Logging level name
    logFile: str = ""                   # Extra log file, disabled if empty
    csvChunkSize: int = 1000            # Rows read at once from CSV files


def LoadSettings(environ: t.Mapping[str, str] = os.environ) -> Settings:
    """Build settings from DATABASE_UPDATER_* environment variables, using defaults for missing ones."""

    chunkSize = environ.get("DATABASE_UPDATER_CSV_CHUNK_SIZE", "1000")
    if not chunkSize.isdigit() or int(chunkSize) <= 0:
        raise ValueError(f"DATABASE_UPDATER_CSV_CHUNK_SIZE must be a positive integer, got '{chunkSize}'")

    return Settings(
        logLevel=environ.get("DATABASE_UPDATER_LOG_LEVEL", "INFO").upper(),
        logFile=environ.get("DATABASE_UPDATER_LOG_FILE", ""),
        csvChunkSize=int(chunkSize),
    )
