"""Search provider adapters over Microsoft Graph."""
