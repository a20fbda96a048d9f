"""In-memory tag repository for testing."""

from typing import Optional

from askboard.domain.model import Tag
from askboard.domain.repository import TagRepository
from askboard.domain.value import TagName

from .store import InMemoryStore


class InMemoryTagRepository(TagRepository):
    """In-memory implementation of TagRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def save(self, tag: Tag) -> Tag:
        """Save a tag, upserting by name."""
        for existing in self.store.tags.values():
            if existing.name == tag.name:
                updated = existing.model_copy(
                    update={"description": tag.description or existing.description}
                )
                self.store.tags[existing.id] = updated
                return updated
        self.store.tags[tag.id] = tag
        return tag

    async def find_by_names(self, names: list[TagName]) -> list[Tag]:
        """Find tags by names."""
        wanted = {name.root for name in names}
        return [t for t in self.store.tags.values() if t.name.root in wanted]

    async def search(self, search: Optional[str] = None, limit: int = 20) -> list[Tag]:
        """Catalog tags ordered by name."""
        tags = [
            t
            for t in self.store.tags.values()
            if not search or search.lower() in t.name.root.lower()
        ]
        return sorted(tags, key=lambda t: t.name.root)[:limit]
