"""Core application components: configuration, errors, middleware, events."""
