class PathViolation(ValueError):
    """A file path resolved outside of the permitted base directory."""
