class CommitError(RuntimeError):
    """Writing patched files failed and the caller asked for strict handling."""

    def __init__(self, message: str, summary=None):
        super().__init__(message)
        self.summary = summary
