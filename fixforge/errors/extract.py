class ExtractError(ValueError):
    """Analysis-tool output could not be read as a list of fix records."""
