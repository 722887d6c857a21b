"""Driver-side helpers: configuration, constants and starting patterns."""
