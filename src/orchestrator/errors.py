"""Verification run errors."""


class UpstreamUnavailable(RuntimeError):
    """The route source could not be reached; no route was tested."""
