"""Single source of truth for the devprep version string."""

__version__: str = "1.0.0"
