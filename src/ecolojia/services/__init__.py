"""Analysis services."""
