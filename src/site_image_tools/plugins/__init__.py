"""Build step plugins."""
