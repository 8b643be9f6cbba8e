"""Game catalog importer."""
