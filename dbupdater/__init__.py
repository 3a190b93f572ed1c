"""Notes and database ingestion tools exposed over the Model Context Protocol."""

from dbupdater.config import Settings, LoadSettings
from dbupdater.connection import ParseConnectionString
from dbupdater.database import DatabaseUpdate, DatabaseWriter, LoggingDatabase
from dbupdater.dispatcher import Dispatcher
from dbupdater.notes import Note, NoteNotFound, NotesStore
from dbupdater.tabular import ParseFile, UnsupportedFileType
