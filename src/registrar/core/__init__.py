"""Configuration, persistence, logging and error handling."""
