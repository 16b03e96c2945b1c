"""Would You Rather question generator."""
