"""ProjectHub: collaborative projects and learning paths API."""

__version__ = "0.3.0"
