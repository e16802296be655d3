"""Configuration and logging for the GoFetch client."""
