"""Core configuration, error taxonomy and middleware."""
