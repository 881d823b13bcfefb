"""Infrastructure - logging setup and the bundled hero store."""
