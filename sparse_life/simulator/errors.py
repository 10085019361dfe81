class InvalidSeed(ValueError):
    """Raised when a seed cannot be turned into an initial generation."""
