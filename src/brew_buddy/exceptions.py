"""Custom exceptions for brew-buddy."""


class BrewBuddyError(Exception):
    """Base exception for brew-buddy."""

    pass


class CollectionFetchError(BrewBuddyError):
    """Raised when the beverage catalog cannot be fetched from the data source."""

    pass


class ImageResolutionError(BrewBuddyError):
    """Raised when a signed image URL cannot be obtained for a beverage."""

    def __init__(self, beverage_id: str, message: str):
        super().__init__(f"{beverage_id}: {message}")
        self.beverage_id = beverage_id
