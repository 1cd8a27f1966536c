"""Exception hierarchy for curvekit."""


class CurveKitError(Exception):
    """Base exception for all curvekit errors."""

    pass


class CurveError(CurveKitError):
    """Errors in curve construction or evaluation."""

    pass


class EmptySequenceError(CurveError):
    """Operation attempted on a piecewise curve with no segments."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Cannot {operation} an empty piecewise")


class InvalidParameterError(CurveError):
    """Curve parameter that is NaN or infinite."""

    def __init__(self, t: float) -> None:
        self.t = t
        super().__init__(f"Curve parameter must be finite, got {t!r}")


class MalformedContourError(CurveError):
    """Contour data cannot be turned into curve segments."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Malformed contour: {reason}")


class UnsupportedPrimitiveError(CurveError):
    """Drawing path verb outside move/line/quad/cubic/close."""

    def __init__(self, verb: object) -> None:
        self.verb = verb
        super().__init__(f"Unsupported path verb: {verb!r}")


class FontError(CurveKitError):
    """Errors related to font loading."""

    pass


class FontLoadError(FontError):
    """Error loading a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font '{path}': {reason}")
