"""Core infrastructure: configuration, logging, errors and the entity store."""
