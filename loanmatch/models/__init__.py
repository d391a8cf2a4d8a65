"""Domain enums shared across schemas and engines."""
