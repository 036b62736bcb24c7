"""Setup (config, logging, DI)."""
