"""Command-line and interface adapters."""
