"""Config – dataclass settings loaded from the environment."""
