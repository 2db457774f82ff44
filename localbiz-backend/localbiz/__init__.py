"""Local Business Directory API."""
