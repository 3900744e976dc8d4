"""HTTP API for Notebox."""
