"""orgconfig CLI API package - command-line interface for inspecting options."""
