"""Infrastructure: Microsoft Graph adapters, caches, persistence."""
