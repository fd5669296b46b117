from .base import APIError


class DriveError(APIError):
    """Base exception for Drive API errors."""
    pass


class DrivePermissionError(DriveError):
    """Raised when the caller lacks permission for a Drive operation."""
    pass


class DriveNotFoundError(DriveError):
    """Raised when the Drive API reports that a file or drive does not exist."""
    pass


class ResolutionError(DriveError):
    """Base exception for failures to map a name to a single resource."""

    def __init__(self, message: str, parent_id: str = None, name: str = None):
        super().__init__(message)
        self.parent_id = parent_id
        self.name = name


class ResourceNotFoundError(ResolutionError):
    """Raised when no resource matches the requested name under a parent."""
    pass


class AmbiguousResourceError(ResolutionError):
    """Raised when more than one resource matches the requested name under a parent."""

    def __init__(self, message: str, parent_id: str = None, name: str = None, matches: list = None):
        super().__init__(message, parent_id=parent_id, name=name)
        self.matches = matches or []
