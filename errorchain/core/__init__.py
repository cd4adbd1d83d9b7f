"""Core components of errorchain."""
