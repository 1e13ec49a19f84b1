"""Resume and cover-letter PDF generation from per-company YAML data."""

__version__ = "0.1.0"
