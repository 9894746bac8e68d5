"""
Domain-level errors.

Routers never see raw database exceptions: repositories and services
translate them into one of the categories below, and ``main.py`` maps each
category to an HTTP status.
"""

class SongCatalogError(Exception):
    """Base class for catalog errors."""
    status_code = 500

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class ValidationError(SongCatalogError):
    """Malformed client input, e.g. a release date not in YYYY-MM-DD."""
    status_code = 400


class NotFoundError(SongCatalogError):
    """The requested song id does not exist."""
    status_code = 404


class StoreError(SongCatalogError):
    """Any other database failure. The message is never sent to the client."""
    status_code = 500
