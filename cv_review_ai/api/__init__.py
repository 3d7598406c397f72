"""HTTP API for the CV review pipeline."""
