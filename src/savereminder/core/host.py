"""Editor-side collaborators the reminder queries each tick."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from savereminder.core.events import DOCUMENT_DIRTIED, DOCUMENT_SAVED, EventBus
from savereminder.logging import get_logger


class EditorHost(Protocol):
    def any_document_dirty(self) -> bool: ...

    def is_simulating(self) -> bool: ...


@dataclass(slots=True)
class Document:
    name: str
    path: Path | None = None
    dirty: bool = False


class DocumentRegistry:
    """Open documents and their dirty flags.

    Publishes ``document.dirtied`` on a clean-to-dirty transition and
    ``document.saved`` after a save.
    """

    def __init__(self, events: EventBus) -> None:
        self.events = events
        self.logger = get_logger("documents")
        self._documents: dict[str, Document] = {}
        self._simulating = False

    def __contains__(self, name: str) -> bool:
        return name in self._documents

    def __len__(self) -> int:
        return len(self._documents)

    def open(self, name: str, path: Path | None = None) -> Document:
        document = self._documents.get(name)
        if document is None:
            document = Document(name=name, path=path)
            self._documents[name] = document
            self.logger.debug("Opened document {}", name)
        return document

    def close(self, name: str) -> None:
        document = self._documents.pop(name, None)
        if document is not None and document.dirty:
            # Closing discards the edits; treat it like a save for the timer.
            self.events.emit(DOCUMENT_SAVED, document)

    def get(self, name: str) -> Document:
        return self._documents[name]

    def mark_dirty(self, name: str) -> None:
        document = self._documents[name]
        if document.dirty:
            return
        document.dirty = True
        self.events.emit(DOCUMENT_DIRTIED, document)

    def mark_clean(self, name: str) -> None:
        """Clear the dirty flag without a write, e.g. after undoing back to the saved text."""

        document = self._documents[name]
        if not document.dirty:
            return
        document.dirty = False
        self.events.emit(DOCUMENT_SAVED, document)

    def mark_saved(self, name: str) -> None:
        document = self._documents[name]
        document.dirty = False
        self.logger.info("Saved {}", name)
        self.events.emit(DOCUMENT_SAVED, document)

    def dirty_documents(self) -> list[Document]:
        return [doc for doc in self._documents.values() if doc.dirty]

    def any_document_dirty(self) -> bool:
        return any(doc.dirty for doc in self._documents.values())

    def set_simulating(self, value: bool) -> None:
        self._simulating = value

    def is_simulating(self) -> bool:
        return self._simulating
