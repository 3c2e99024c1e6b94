"""Value types describing positions in source texts."""
