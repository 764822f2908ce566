"""API-key access control for the HTTP layer."""
