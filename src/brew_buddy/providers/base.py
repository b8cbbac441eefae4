"""Base interfaces for catalog collaborators."""

from abc import ABC, abstractmethod

from brew_buddy.schema import BeveragePage


class BeverageSource(ABC):
    """Abstract base class for beverage data sources."""

    @abstractmethod
    async def fetch_beverages(
        self,
        *,
        type: str | None = None,
        name_contains: str | None = None,
        size: int | None = None,
    ) -> BeveragePage:
        """Fetch one page of beverages.

        Args:
            type: Optional exact type filter applied by the source.
            name_contains: Optional name substring applied by the source.
            size: Requested page size.

        Returns:
            BeveragePage with the records and paging metadata

        Raises:
            CollectionFetchError: If the source cannot be reached or answers
                with a non-success response.
        """
        pass

    async def aclose(self) -> None:
        """Release any held resources."""
        return None


class ImageReferenceSource(ABC):
    """Abstract base class for signed image URL issuers."""

    @abstractmethod
    async def image_url(self, beverage_id: str) -> str:
        """Return a fresh, time-limited URL for the beverage image."""
        pass
