"""Core operations and dependency-injected services."""
