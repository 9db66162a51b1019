"""Print-filter building blocks: job options from PPD data, poster-style raster splitting, messages and shared definitions."""

__version__ = "0.1.0"