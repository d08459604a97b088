class ProjectLoadError(Exception):
    """Base class for everything that can stop a project list from loading."""


class EmptyInput(ProjectLoadError):
    def __init__(self, message: str = "Please enter a GitHub username"):
        super().__init__(message)


class HttpError(ProjectLoadError):
    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"Failed to fetch projects (HTTP {status_code})")


class ParseError(ProjectLoadError):
    pass


class NetworkError(ProjectLoadError):
    pass
