"""Settings and configuration shared by the CLI."""
