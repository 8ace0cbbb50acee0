"""Infrastructure adapters: database, security and realtime delivery."""
