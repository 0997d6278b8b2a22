"""Core modules for restexec."""
