"""Interactive admission-probability curve explorer."""
from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("admission-curves")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"
