"""Application services for confstore."""
