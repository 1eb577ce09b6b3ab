"""Infrastructure adapters: logging, settings, storage and wiring."""
