"""orgconfig API package."""
