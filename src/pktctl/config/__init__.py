"""Configuration — pktctl.toml discovery, settings, and logging setup."""
