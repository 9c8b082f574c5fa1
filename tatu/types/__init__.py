"""Runtime value classes and the environment."""
