"""Tag repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from askboard.domain.model.tag import Tag
from askboard.domain.value import TagName


class TagRepository(ABC):
    """Repository interface for the tag catalog."""

    @abstractmethod
    async def save(self, tag: Tag) -> Tag:
        """Save or update a tag.

        Args:
            tag: Tag to save

        Returns:
            Saved tag
        """
        pass

    @abstractmethod
    async def find_by_names(self, names: list[TagName]) -> list[Tag]:
        """Find multiple tags by names in a single query.

        Args:
            names: List of tag names

        Returns:
            List of found tags (may be fewer than requested if some don't exist)
        """
        pass

    @abstractmethod
    async def search(self, search: Optional[str] = None, limit: int = 20) -> list[Tag]:
        """Find catalog tags ordered by name.

        Args:
            search: Case-insensitive substring of the name
            limit: Maximum number of tags to return

        Returns:
            Matching tags
        """
        pass
