"""Single responsibility: a class should have one reason to change.

``BadJournal`` keeps entries *and* knows how to persist itself, so a change
to storage rules forces a change to the journal. ``Journal`` only tracks
entries; ``Persistence`` owns saving and loading.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class Journal:
    """Keeps numbered text entries."""

    def __init__(self) -> None:
        self.entries: list[str] = []
        self.count = 0

    def add_entry(self, text: str) -> int:
        """Store ``"<n>: <text>"`` and return the entry's index."""
        self.count += 1
        self.entries.append(f"{self.count}: {text}")
        return self.count - 1

    def remove_entry(self, index: int) -> None:
        del self.entries[index]

    def __str__(self) -> str:
        return "\n".join(self.entries)


class BadJournal(Journal):
    """Journal that also persists itself: two reasons to change."""

    def save(self, filename: str, overwrite: bool = False) -> None:
        logger.info(
            "BadJournal would save %d entries to %s (overwrite=%s)",
            len(self.entries),
            filename,
            overwrite,
        )

    def load_file(self, filename: str) -> None:
        logger.info("BadJournal would load entries from file %s", filename)

    def load_uri(self, uri: str) -> None:
        logger.info("BadJournal would load entries from %s", uri)


class Persistence:
    """Saves and loads journals. Storage is out of scope, so calls only log."""

    def save_to_file(
        self, journal: Journal, filename: str, overwrite: bool = False
    ) -> None:
        logger.info(
            "Would save %d journal entries to %s (overwrite=%s)",
            len(journal.entries),
            filename,
            overwrite,
        )

    def load_file(self, filename: str) -> None:
        logger.info("Would load journal from file %s", filename)

    def load_uri(self, uri: str) -> None:
        logger.info("Would load journal from %s", uri)


def run() -> None:
    journal = Journal()
    journal.add_entry("Hip to be square")
    journal.add_entry("Get up and drive your funky soul")
    print(f"Journal entries:\n{journal}")

    Persistence().save_to_file(journal, "journal_1.txt")
