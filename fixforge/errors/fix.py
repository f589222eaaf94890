class MalformedFixError(ValueError):
    """A fix payload violates the tool contract in a way no fallback can repair.

    Raised at render time, e.g. for an insertion point other than
    ``beforeStart`` / ``afterEnd``. Ordinary rejections (missing data,
    overlapping ranges) never raise; they end up in ``FixReport.rejected``.
    """

    def __init__(self, message: str, *, replacement=None):
        super().__init__(message)
        self.replacement = replacement


class NothingToRenderError(RuntimeError):
    """A snippet was requested from a session with no accepted fixes."""
