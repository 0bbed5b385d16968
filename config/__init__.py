"""Config package - settings loaded from the environment."""
