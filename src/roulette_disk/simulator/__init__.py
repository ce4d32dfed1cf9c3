"""Desktop window for the roulette disk."""
