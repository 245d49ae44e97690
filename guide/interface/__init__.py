"""Interface layer: HTTP transport."""
