"""File storage — scoped reads and atomic writes of the tracker record."""

from __future__ import annotations

import logging
from pathlib import Path

from questkernel.config import settings
from questkernel.kernel import codec
from questkernel.kernel.errors import QuestError, StorageError
from questkernel.kernel.tracker import Tracker

logger = logging.getLogger(__name__)


class FileStorage:
    """JSON file holding one tracker record.

    Every I/O or parse failure surfaces as StorageError (UnknownGoalTypeError
    passes through unchanged). Saves go through a sibling ``.tmp`` file so a
    failed write never truncates the existing record.
    """

    def __init__(self, path: str | Path, level_step: int | None = None):
        self.path = Path(path)
        self.level_step = level_step or settings.level_step

    def exists(self) -> bool:
        return self.path.exists()

    def save(self, tracker: Tracker) -> None:
        text = codec.dumps(tracker)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            with open(tmp, "w", encoding="utf-8") as f:
                f.write(text)
            tmp.replace(self.path)
        except OSError as e:
            tmp.unlink(missing_ok=True)
            raise StorageError(f"Could not save tracker to {self.path}: {e}") from e
        logger.info("Saved %d goals (score=%d) to %s", len(tracker), tracker.total_score(), self.path)

    def load(self) -> Tracker:
        """Read the record and rebuild a new Tracker. Raises StorageError if missing."""
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Could not read tracker from {self.path}: {e}") from e

        try:
            tracker = codec.loads(text, level_step=self.level_step)
        except QuestError as e:
            logger.warning("Aborted load of %s: %s", self.path, e)
            raise
        logger.info("Loaded %d goals (score=%d) from %s", len(tracker), tracker.total_score(), self.path)
        return tracker

    def load_or_new(self) -> Tracker:
        """Like load(), but a missing file yields an empty Tracker (first run)."""
        if not self.exists():
            logger.info("No tracker at %s, starting empty", self.path)
            return Tracker(level_step=self.level_step)
        return self.load()


def get_storage() -> FileStorage:
    return FileStorage(settings.data_file)
