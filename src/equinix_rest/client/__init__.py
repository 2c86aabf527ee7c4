"""HTTP client, pagination engine, and error types."""
