"""Runtime configuration package."""
