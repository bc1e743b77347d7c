"""
Base Repository - Abstract interface for document storage

Handlers only ever load the whole Document, transform it in memory and
save it back, so this contract is deliberately narrow. Swapping the JSON
file for a database means writing one new implementation of these three
methods without touching routers or services.
"""

from abc import ABC, abstractmethod

from turno.document import Document


class BaseRepository(ABC):
    """Abstract base class for document repositories"""

    @abstractmethod
    def ensure_initialized(self) -> None:
        """
        Create an empty Document in storage if none exists.

        Idempotent. Must not inspect or rewrite an existing Document.
        """
        pass

    @abstractmethod
    def load(self) -> Document:
        """
        Load the full Document.

        Never raises: unreadable or corrupt storage yields an empty Document.
        """
        pass

    @abstractmethod
    def save(self, document: Document) -> None:
        """
        Replace the stored Document with ``document``.

        A concurrent ``load()`` sees either the old or the new Document, never
        a partial write. Errors propagate to the caller.
        """
        pass

    @abstractmethod
    def describe(self) -> dict:
        """Storage details for health checks."""
        pass
