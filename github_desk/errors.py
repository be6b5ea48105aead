class GitHubDeskError(Exception):
    """Base error for calls proxied to GitHub."""

    def __init__(self, message: str, url: str):
        super().__init__(message)
        self.url = url


class GitHubTransportError(GitHubDeskError):
    """The request never produced a response (connection, DNS, read failure)."""


class GitHubDecodeError(GitHubDeskError):
    """GitHub answered, but the body is not valid JSON."""

    def __init__(self, message: str, url: str, excerpt: str = ""):
        super().__init__(message, url)
        self.excerpt = excerpt
