"""HTTP API for Pura Search."""
