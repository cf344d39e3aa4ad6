"""Core functionality for mise-devcontainer."""
