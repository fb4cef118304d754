class AirbnbError(Exception):
    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class UnknownToolError(Exception):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown tool: {name}")
