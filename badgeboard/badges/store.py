"""JSON file persistence for the badge collection."""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from typing import Any

from badgeboard.errors import NotFoundError, PersistenceError

from .models import Badge, BadgeCollection

logger = logging.getLogger(__name__)


class BadgeStore:
    """Reads and rewrites the whole badge collection as one JSON document.

    The collection is loaded from disk on every read and written in full on
    every mutation. Mutations hold ``self._lock`` for their entire
    read-modify-write so that concurrent requests in one process cannot
    overwrite each other's changes.
    """

    def __init__(self, path: str) -> None:
        """Initialize the store for the file at ``path``."""
        self.path = path
        self._lock = threading.Lock()

    def ensure_exists(self) -> bool:
        """Create an empty collection file if there is none yet."""
        with self._lock:
            if os.path.exists(self.path):
                return False
            self.write_all({})
        return True

    def read_all(self) -> BadgeCollection:
        """Return the stored collection, or an empty one if it can't be read."""
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, encoding="utf-8") as f:
                data: Any = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Error reading badges file {self.path}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.error(
                f"Badges file {self.path} does not hold a JSON object, ignoring it"
            )
            return {}

        badges: BadgeCollection = {}
        for user_id, user_badges in data.items():
            if not isinstance(user_badges, list):
                logger.error(
                    f"Badges for user {user_id} in {self.path} are not a list, "
                    "ignoring them"
                )
                continue
            badges[user_id] = user_badges
        return badges

    def write_all(self, badges: BadgeCollection) -> None:
        """Replace the stored collection with ``badges``.

        Raises:
            PersistenceError: If the file could not be written.
        """
        directory = os.path.dirname(os.path.abspath(self.path))
        tmp_path = None
        try:
            os.makedirs(directory, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=directory,
                prefix=".badges-",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_path = tmp.name
                json.dump(badges, tmp, indent=2, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Error writing badges file {self.path}: {e}")
            if tmp_path and os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise PersistenceError("Failed to save badges.") from e

    def add_badge(self, user_id: str, tooltip: str, badge_url: str) -> None:
        """Append a badge to ``user_id``'s list and persist the collection."""
        with self._lock:
            badges = self.read_all()
            entry: Badge = {"tooltip": tooltip, "badge": badge_url}
            badges.setdefault(user_id, []).append(entry)
            self.write_all(badges)

    def delete_badge(self, user_id: str, index: int) -> None:
        """Remove the badge at ``index`` for ``user_id`` and persist.

        A user whose last badge is removed is dropped from the collection.

        Raises:
            NotFoundError: If the user has no badge at ``index``.
            PersistenceError: If the file could not be written.
        """
        with self._lock:
            badges = self.read_all()
            user_badges = badges.get(user_id)
            if not user_badges or not 0 <= index < len(user_badges):
                raise NotFoundError("Badge not found")

            del user_badges[index]
            if not user_badges:
                del badges[user_id]
            self.write_all(badges)
