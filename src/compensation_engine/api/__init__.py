"""HTTP API for the compensation engine."""
