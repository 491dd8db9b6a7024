"""Chapter navigation, chapter-list state and key bindings for a terminal manga reader."""

__version__ = "0.1.0"

__all__ = ["chapters", "manga_models", "manga_input"]