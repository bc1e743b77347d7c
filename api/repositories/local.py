"""
Local File Repository - Single JSON file document storage

The whole Document lives in one pretty-printed JSON file whose path comes
from settings (TURNO_DATA_FILE). Writes go through a temp file and an
atomic rename.
"""

import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from turno.document import Document, empty_document
from turno.io.readers import read_json
from turno.io.writers import atomic_write_json
from turno.settings import get_settings
from api.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class LocalFileRepository(BaseRepository):
    """Repository implementation using a local JSON file"""

    def __init__(self, data_file: Optional[Path] = None):
        self.data_file = Path(data_file) if data_file is not None else get_settings().data_file
        logger.info(f"LocalFileRepository initialized with data_file: {self.data_file}")

    def ensure_initialized(self) -> None:
        """Write an empty Document if the data file does not exist yet"""
        if self.data_file.exists():
            logger.info(f"Data file exists: {self.data_file}")
            return

        logger.info(f"Creating new data file: {self.data_file}")
        atomic_write_json(empty_document().to_json(), self.data_file)
        logger.info("Data file created")

    def load(self) -> Document:
        """
        Read and parse the data file.

        Fails open: a missing, unreadable or malformed file is logged and
        replaced by an empty Document. The broken file is left as-is and
        will be overwritten by the next save.
        """
        try:
            raw = read_json(self.data_file)
            document = Document.model_validate(raw)
        except (OSError, ValueError, RecursionError, ValidationError) as e:
            logger.error(f"Error reading data from {self.data_file}: {e}", exc_info=True)
            return empty_document()

        logger.debug(
            f"Data read: {len(document.missions)} missions, "
            f"{len(document.used_combinations)} used combinations"
        )
        return document

    def save(self, document: Document) -> None:
        """Serialize the full Document and atomically replace the data file"""
        try:
            atomic_write_json(document.to_json(), self.data_file)
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Error saving data to {self.data_file}: {e}", exc_info=True)
            raise
        logger.info(f"Data saved to {self.data_file}")

    def describe(self) -> dict:
        return {
            "data_file": str(self.data_file),
            "data_file_exists": self.data_file.exists(),
        }
