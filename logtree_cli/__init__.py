"""LogTree command line interface."""
from logtree import __version__

__all__ = ["__version__"]
