"""Tool handlers. Each takes validated input plus the AppState and returns text."""
