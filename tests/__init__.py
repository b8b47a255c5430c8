"""orgconfig test package."""
