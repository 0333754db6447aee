"""Schema loading, validation and config file I/O."""
