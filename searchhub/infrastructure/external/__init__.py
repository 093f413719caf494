"""External integrations (Microsoft Graph)."""
