"""Infrastructure adapters: configuration, logging, providers and middleware."""
