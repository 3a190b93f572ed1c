"""Request handlers for resources (notes), tools and prompts.

The dispatcher does not know about the transport: every method takes plain
arguments and returns mcp.types objects, raising McpError on failure.
"""

import logging
import typing as t
from urllib.parse import urlsplit

from mcp import types

from dbupdater.connection import ParseConnectionString
from dbupdater.database import DatabaseUpdate, DatabaseWriter
from dbupdater.errors import InternalError, InvalidParams, MethodNotFound, NotFound
from dbupdater.notes import NoteNotFound, NotesStore
from dbupdater.tabular import DetectFileType, ParseFile, UnsupportedFileType


logger = logging.getLogger(__name__)

NOTE_SCHEME = "note"
NOTE_MIME_TYPE = "text/plain"

SUMMARIZE_PROMPT = "summarize_notes"

# Tools reading files, run outside the event loop by the server
BLOCKING_TOOLS = frozenset({"update_database"})


def NoteURI(noteId: str) -> str:
    return f"{NOTE_SCHEME}:///{noteId}"



# STATIC DESCRIPTORS
# ==================


TOOLS = [
    types.Tool(
        name="create_note",
        description="Create a new note",
        inputSchema={
            "type": "object",
            "properties": {
                "title":   {"type": "string", "description": "Title of the note"},
                "content": {"type": "string", "description": "Text content of the note"},
            },
            "required": ["title", "content"],
        },
    ),
    types.Tool(
        name="update_database",
        description="Update the database from a CSV or Excel file",
        inputSchema={
            "type": "object",
            "properties": {
                "filePath":         {"type": "string", "description": "Path to the CSV or Excel file"},
                "databaseType":     {"type": "string", "description": "Type of database (e.g., PostgreSQL, MySQL, MongoDB, SQLite)"},
                "connectionString": {"type": "string", "description": "Connection string for the database"},
                "tableName":        {"type": "string", "description": "Name of the table to update"},
            },
            "required": ["filePath", "databaseType", "connectionString", "tableName"],
        },
    ),
]

PROMPTS = [
    types.Prompt(name=SUMMARIZE_PROMPT, description="Summarize all notes"),
]


def RequiredStrings(arguments: dict[str, t.Any] | None, names: list[str]) -> dict[str, str] | None:
    """Return the named arguments if all of them are non-empty strings, None otherwise."""

    arguments = arguments or {}
    values = {name: arguments.get(name) for name in names}
    if all(isinstance(value, str) and value != "" for value in values.values()):
        return values
    return None



# DISPATCHER
# ==========


class Dispatcher:
    """Maps protocol requests to the notes store, the file parsers and the database writer."""

    def __init__(self, store: NotesStore, database: DatabaseWriter, csvChunkSize: int = 1000):
        self.store = store
        self.database = database
        self.csvChunkSize = csvChunkSize
        self.tools: dict[str, t.Callable[[dict[str, t.Any]], list[types.TextContent]]] = {
            "create_note":     self.CreateNote,
            "update_database": self.UpdateDatabase,
        }

    # RESOURCES

    def ListResources(self) -> list[types.Resource]:
        """List every note as a plain text resource."""
        return [
            types.Resource(
                uri=NoteURI(noteId),
                mimeType=NOTE_MIME_TYPE,
                name=note.title,
                description=f"A text note: {note.title}",
            )
            for noteId, note in self.store.List()
        ]

    def ReadResource(self, uri: str) -> list[types.TextResourceContents]:
        """Return the content of the note addressed by a note:///{id} URI."""

        parts = urlsplit(str(uri))
        noteId = parts.path.removeprefix("/")
        if parts.scheme != NOTE_SCHEME:
            raise NotFound(f"Unknown resource: {uri}")

        try:
            note = self.store.Get(noteId)
        except NoteNotFound as e:
            raise NotFound(str(e))

        return [types.TextResourceContents(uri=str(uri), mimeType=NOTE_MIME_TYPE, text=note.content)]

    # TOOLS

    def ListTools(self) -> list[types.Tool]:
        return list(TOOLS)

    def CallTool(self, name: str, arguments: dict[str, t.Any] | None) -> list[types.TextContent]:
        """Run the named tool, raising MethodNotFound for unknown names."""

        if name not in self.tools:
            raise MethodNotFound(f"Unknown tool: {name}")
        return self.tools[name](arguments or {})

    def CreateNote(self, arguments: dict[str, t.Any]) -> list[types.TextContent]:
        values = RequiredStrings(arguments, ["title", "content"])
        if values is None:
            raise InvalidParams("Title and content are required")

        noteId = self.store.Create(values["title"], values["content"])
        logger.info("Created note %s: %s", noteId, values["title"])
        return [types.TextContent(type="text", text=f"Created note {noteId}: {values['title']}")]

    def UpdateDatabase(self, arguments: dict[str, t.Any]) -> list[types.TextContent]:
        """Parse a CSV or Excel file and forward its rows to the database writer.
        Arguments are validated before the file is opened.
        """

        values = RequiredStrings(arguments, ["filePath", "databaseType", "connectionString", "tableName"])
        if values is None:
            raise InvalidParams("File path, database type, connection string, and table name are required")
        filePath = values["filePath"]

        # check the extension before reading anything
        try:
            DetectFileType(filePath)
        except UnsupportedFileType as e:
            raise InvalidParams(str(e))

        # parse and forward, any failure is reported as an internal error
        try:
            rows = ParseFile(filePath, self.csvChunkSize)
            update = DatabaseUpdate(
                databaseType=values["databaseType"],
                connection=ParseConnectionString(values["connectionString"]),
                tableName=values["tableName"],
                rows=rows,
            )
            report = self.database.Write(update)
        except Exception as e:
            logger.exception("Error updating database from '%s'", filePath)
            raise InternalError(f"Error updating database: {e}") from e

        return [types.TextContent(type="text", text=f"Successfully updated database from {filePath}\n{report}")]

    # PROMPTS

    def ListPrompts(self) -> list[types.Prompt]:
        return list(PROMPTS)

    def GetPrompt(self, name: str, arguments: dict[str, str] | None = None) -> types.GetPromptResult:
        """Build the summarize_notes prompt, embedding every note as a resource."""

        if name != SUMMARIZE_PROMPT:
            raise NotFound(f"Unknown prompt: {name}")

        embeddedNotes = [
            types.PromptMessage(
                role="user",
                content=types.EmbeddedResource(
                    type="resource",
                    resource=types.TextResourceContents(
                        uri=NoteURI(noteId), mimeType=NOTE_MIME_TYPE, text=note.content),
                ),
            )
            for noteId, note in self.store.List()
        ]

        return types.GetPromptResult(
            description="Summarize all notes",
            messages=[
                types.PromptMessage(role="user",
                    content=types.TextContent(type="text", text="Please summarize the following notes:")),
                *embeddedNotes,
                types.PromptMessage(role="user",
                    content=types.TextContent(type="text", text="Provide a concise summary of all the notes above.")),
            ],
        )
