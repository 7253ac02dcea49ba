class StartupConfigurationError(RuntimeError):
    """The server cannot start: bad settings or missing/unreadable TLS material."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path
