"""searchhub: federated search across SharePoint, Outlook and Teams via Microsoft Graph."""
