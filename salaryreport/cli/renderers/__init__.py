"""Output renderers for the CLI."""
