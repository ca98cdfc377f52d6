"""
A media identification module for naming movie and TV files.

This module recognises movies and TV episodes from their filenames, derives a
canonical title, and renders a normalized target name from a configurable
template. That name then drives a rename, move, copy or link of the file into
a media library. Lookups against TMDb are optional and only refine what was
already derived from the filename.

The module is organized into several categories:
- Identifying files (pattern table, extraction, classification, name cleanup).
- Interfacing with TMDb for canonical names and episode titles.
- Rendering target names and acting on files.
- Utility functions for configuration, text handling and logging.
"""

__version__ = "1.0.0"

__all__ = ["__version__"]
