import copy
import json
import logging
import os
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)

STORAGE_KEY = "zentro-apartments"


class MemoryStore:
    """Key/value store kept in process memory."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._items = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class JsonFileStore:
    """Key/value store persisted as a single JSON object on disk."""

    def __init__(self, path: str):
        self.path = path

    def _read(self) -> Dict[str, str]:
        """Current file contents; unreadable JSON counts as empty and is
        replaced by the next write."""
        if not os.path.exists(self.path):
            return {}
        with open(self.path, "r", encoding="utf-8") as fh:
            try:
                items = json.load(fh)
            except ValueError as exc:
                logger.error(f"Discarding corrupt store file {self.path}: {exc}")
                return {}
        if not isinstance(items, dict):
            logger.error(
                f"Discarding store file {self.path}: expected an object, "
                f"got {type(items).__name__}"
            )
            return {}
        return items

    def _write(self, items: Dict[str, str]) -> None:
        with open(self.path, "w", encoding="utf-8") as fh:
            json.dump(items, fh)

    def get_item(self, key: str) -> Optional[str]:
        return self._read().get(key)

    def set_item(self, key: str, value: str) -> None:
        items = self._read()
        items[key] = value
        self._write(items)

    def remove_item(self, key: str) -> None:
        items = self._read()
        if key in items:
            del items[key]
            self._write(items)


class ListingCache:
    """Local snapshot of property listings for offline edits.

    The snapshot is loaded once when the cache is built and written back after
    every mutation. It is not a system of record and is not safe for several
    writers: each instance allocates ids from its own snapshot.
    """

    def __init__(self, store, defaults: Optional[List[dict]] = None, key: str = STORAGE_KEY):
        self.store = store
        self.key = key
        self.defaults = copy.deepcopy(defaults or [])
        self.listings: List[dict] = copy.deepcopy(self.defaults)
        self._load()
        logger.info("ListingCache initialized with %d properties", len(self.listings))

    def _load(self) -> None:
        try:
            saved = self.store.get_item(self.key)
            if saved:
                data = json.loads(saved)
                if not isinstance(data, list):
                    raise ValueError(f"expected a list of listings, got {type(data).__name__}")
                self.listings = data
        except (OSError, ValueError) as exc:
            # json.JSONDecodeError is a ValueError; corrupt snapshots are dropped
            logger.error(f"Error loading saved listings: {exc}")

    def _save(self) -> bool:
        try:
            self.store.set_item(self.key, json.dumps(self.listings))
            return True
        except (OSError, TypeError, ValueError) as exc:
            logger.error(f"Error saving listings: {exc}")
            return False

    def _index_of(self, listing_id: int) -> int:
        for index, listing in enumerate(self.listings):
            if listing.get("id") == listing_id:
                return index
        return -1

    def next_id(self) -> int:
        ids = [listing["id"] for listing in self.listings if "id" in listing]
        return max(ids) + 1 if ids else 1

    def get_all(self) -> List[dict]:
        return copy.deepcopy(self.listings)

    def get_by_id(self, listing_id: int) -> Optional[dict]:
        index = self._index_of(listing_id)
        return copy.deepcopy(self.listings[index]) if index != -1 else None

    def add(self, data: dict) -> dict:
        listing = {**data, "id": self.next_id()}
        self.listings.append(listing)
        self._save()
        return copy.deepcopy(listing)

    def update(self, listing_id: int, data: dict) -> Optional[dict]:
        index = self._index_of(listing_id)
        if index == -1:
            return None
        self.listings[index] = {**self.listings[index], **data, "id": listing_id}
        self._save()
        return copy.deepcopy(self.listings[index])

    def delete(self, listing_id: int) -> bool:
        index = self._index_of(listing_id)
        if index == -1:
            return False
        del self.listings[index]
        self._save()
        return True

    def add_media(self, listing_id: int, media_type: str, urls: List[str]) -> bool:
        index = self._index_of(listing_id)
        if index == -1:
            return False
        listing = self.listings[index]
        if media_type == "photos":
            images = listing.setdefault("images", {})
            images["gallery"] = list(images.get("gallery", [])) + list(urls)
        elif media_type == "videos":
            listing["videos"] = list(listing.get("videos", [])) + list(urls)
        else:
            raise ValueError(f"Unknown media type: {media_type}")
        self._save()
        return True

    def reset_to_default(self) -> None:
        self.listings = copy.deepcopy(self.defaults)
        try:
            self.store.remove_item(self.key)
        except OSError as exc:
            logger.error(f"Error clearing saved listings: {exc}")
        logger.info("Listings reset to default")
