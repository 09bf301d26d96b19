"""HTTP routes of the API, grouped by version."""
