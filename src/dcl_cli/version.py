"""Single source of truth for the package version."""

__version__: str = "0.1.0"
