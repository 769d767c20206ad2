"""jw-proximity package."""
from importlib.metadata import version, PackageNotFoundError

from .scoring import distance, jaro, proximity

try:
    __version__ = version("jw-proximity")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

__all__ = ["__version__", "distance", "jaro", "proximity"]
