"""Domain helpers (pure functions over document records)."""
