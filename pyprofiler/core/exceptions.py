class IngestionError(Exception):
    """
    Raised when a sample file cannot be read, or when a field of a sample
    record cannot be parsed as a number. No partially loaded sample store is
    handed out when this exception is raised.
    """

    def __init__(
        self,
        reason: str,
        path: str | None = None,
        line_number: int | None = None
    ) -> None:
        super().__init__(reason)
        self.reason = reason
        self.path = path
        self.line_number = line_number

    def __str__(self):
        location = self.path or "<rows>"
        if self.line_number is not None:
            location = f"{location}:{self.line_number}"
        return f"[{location}] {self.reason}"


class DegenerateInputError(Exception):
    pass


class ConfigurationError(Exception):
    pass
