"""Infrastructure adapters: parsing, settings, logging and wiring."""
