"""Terminal UI helpers for the command line interface."""
