"""
Category Catalog

In-memory list of YouTube video categories loaded from a
videoCategories.list JSON document.

Document shape:
    {"kind": ..., "etag": ...,
     "items": [{"kind": ..., "etag": ..., "id": "28",
                "snippet": {"title": "Science & Technology",
                            "assignable": true, "channelId": "..."}}]}
"""

import json
import logging
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from config import settings
from video_upload.exceptions import ConfigLoadError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Category:
    """A platform-defined video category"""

    id: str
    title: str
    assignable: bool = False
    channel_id: str = ""
    kind: str = ""
    etag: str = ""

    @classmethod
    def from_item(cls, item: Dict[str, Any]) -> "Category":
        """
        Build a Category from one entry of the document's ``items``.

        Raises:
            ConfigLoadError: If ``id`` or ``snippet.title`` is missing
        """
        if not isinstance(item, dict):
            raise ConfigLoadError(f"Category item must be an object: {item!r}")

        snippet = item.get("snippet")
        if "id" not in item or not isinstance(snippet, dict) or "title" not in snippet:
            raise ConfigLoadError(
                f"Category item missing 'id' or 'snippet.title': {item!r}"
            )

        return cls(
            id=str(item["id"]),
            title=str(snippet["title"]),
            assignable=bool(snippet.get("assignable", False)),
            channel_id=snippet.get("channelId") or "",
            kind=item.get("kind", ""),
            etag=item.get("etag", ""),
        )


class CategoryCatalog:
    """
    Read-only, ordered collection of categories.

    Usage:
        catalog = CategoryCatalog.load("config/youtube-categories.json")
        category = catalog.get_by_name("science & technology")
        if category is None:
            ...
    """

    def __init__(
        self,
        categories: Tuple[Category, ...],
        kind: str = "",
        etag: str = "",
    ):
        self._categories = tuple(categories)
        self.kind = kind
        self.etag = etag

    @classmethod
    def load(cls, path: Union[str, Path]) -> "CategoryCatalog":
        """
        Load the catalog from a JSON document.

        Args:
            path: Path to the categories JSON file

        Returns:
            Loaded CategoryCatalog

        Raises:
            ConfigLoadError: If the file is missing, not JSON, or malformed
        """
        path = Path(path)

        try:
            with open(path, "r", encoding="utf-8") as f:
                document = json.load(f)
        except FileNotFoundError as e:
            raise ConfigLoadError(f"Category catalog not found: {path}") from e
        except (OSError, ValueError) as e:
            raise ConfigLoadError(
                f"Failed to read category catalog {path}: {e}"
            ) from e

        if not isinstance(document, dict) or not isinstance(
            document.get("items"), list
        ):
            raise ConfigLoadError(
                f"Category catalog {path} has no 'items' list"
            )

        categories = tuple(Category.from_item(item) for item in document["items"])
        logger.info(f"Loaded {len(categories)} categories from {path}")

        return cls(
            categories,
            kind=document.get("kind", ""),
            etag=document.get("etag", ""),
        )

    @property
    def categories(self) -> Tuple[Category, ...]:
        return self._categories

    def get_by_name(self, name: str) -> Optional[Category]:
        """
        Find a category by title (case-insensitive, exact).

        Returns the first match in catalog order, or None.
        """
        wanted = name.casefold()
        for category in self._categories:
            if category.title.casefold() == wanted:
                return category
        return None

    def get_by_id(self, category_id: str) -> Optional[Category]:
        for category in self._categories:
            if category.id == str(category_id):
                return category
        return None

    def assignable(self) -> List[Category]:
        """Categories that can be set on uploaded videos"""
        return [c for c in self._categories if c.assignable]

    def __len__(self) -> int:
        return len(self._categories)

    def __iter__(self) -> Iterator[Category]:
        return iter(self._categories)


# =============================================================================
# PROCESS-WIDE CACHE
# =============================================================================

_catalog_cache: Dict[Path, CategoryCatalog] = {}
_catalog_lock = threading.Lock()


def get_category_catalog(path: Optional[Union[str, Path]] = None) -> CategoryCatalog:
    """
    Get the catalog for ``path``, loading it at most once per process.

    Concurrent first calls block on a lock, so the file is read exactly
    once and no caller sees a partially built catalog.

    Args:
        path: Catalog file (None = YOUTUBE_CATEGORIES_PATH)
    """
    resolved = Path(path or settings.YOUTUBE_CATEGORIES_PATH).resolve()

    with _catalog_lock:
        catalog = _catalog_cache.get(resolved)
        if catalog is None:
            catalog = CategoryCatalog.load(resolved)
            _catalog_cache[resolved] = catalog
        return catalog


def clear_catalog_cache() -> None:
    """Forget cached catalogs (tests)"""
    with _catalog_lock:
        _catalog_cache.clear()
