"""General utility helpers for confstore."""
