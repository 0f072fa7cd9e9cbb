class RecordNotFound(LookupError):
    """Raised when a post, user or tag referenced by a request does not exist."""
