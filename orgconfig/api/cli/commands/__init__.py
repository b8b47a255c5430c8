"""orgconfig CLI command handlers."""
