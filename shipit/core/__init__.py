"""Core types shared by every layer (results, exit codes, config)."""
