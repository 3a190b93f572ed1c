"""In-memory storage for the notes exposed as resources."""

import threading
from dataclasses import dataclass


@dataclass(frozen=True)
class Note:
    """Dataclass to hold a single note."""

    title: str
    content: str


class NoteNotFound(KeyError):
    """Raised when a note id is not in the store."""

    def __init__(self, noteId: str):
        super().__init__(noteId)
        self.noteId = noteId

    def __str__(self) -> str:
        return f"Note {self.noteId} not found"


class NotesStore:
    """Notes indexed by a string id, assigned sequentially on creation.
    Notes are never updated or deleted, so ids are always "1", "2", ... in insertion order.
    """

    def __init__(self):
        self._notes: dict[str, Note] = {}
        self._lock = threading.Lock()

    @classmethod
    def Seeded(cls) -> "NotesStore":
        """Create a store holding the two notes available at startup."""
        store = cls()
        store.Create("First Note", "This is note 1")
        store.Create("Second Note", "This is note 2")
        return store

    def __len__(self) -> int:
        return len(self._notes)

    def __contains__(self, noteId: object) -> bool:
        return noteId in self._notes

    def List(self) -> list[tuple[str, Note]]:
        """Return all (id, note) pairs, in insertion order."""
        return list(self._notes.items())

    def Get(self, noteId: str) -> Note:
        """Return the note with the given id, raising NoteNotFound if missing."""
        if noteId not in self._notes:
            raise NoteNotFound(noteId)
        return self._notes[noteId]

    def Create(self, title: str, content: str) -> str:
        """Store a new note and return its id. Both title and content are required."""

        # reject missing or empty fields
        for field, value in (("title", title), ("content", content)):
            if not isinstance(value, str) or value == "":
                raise ValueError(f"Note {field} is required")

        # id assignment and insertion must not interleave
        with self._lock:
            noteId = str(len(self._notes) + 1)
            self._notes[noteId] = Note(title=title, content=content)
        return noteId
