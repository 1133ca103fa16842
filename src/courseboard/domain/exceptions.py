class CourseboardError(Exception):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class EntityFetchError(CourseboardError):
    """A loader could not read one entity collection (transport, status or payload shape)."""

    def __init__(self, kind: str, detail: str) -> None:
        self.kind = kind
        self.detail = detail
        super().__init__(f"Could not fetch {kind}: {detail}")


class LoadFailure(CourseboardError):
    """One of the concurrent collection fetches failed; the whole load is void."""

    def __init__(self, kind: str, cause: BaseException) -> None:
        self.kind = kind
        self.cause = cause
        super().__init__(f"Failed to load {kind}: {cause}")


class NotLoadedError(CourseboardError):
    """A derived query was requested before any snapshot was loaded."""
