"""Google API services used by the provisioner."""

from . import drive

__all__ = [
    "drive",
]
