class PrepareAssetsError(Exception):
    """Base class for failures that abort asset preparation."""


class ToolNotFoundError(PrepareAssetsError):
    def __init__(self, tool: str) -> None:
        super().__init__(f"`{tool}` command not found. Make sure it is installed and on PATH.")
        self.tool = tool


class CommandFailedError(PrepareAssetsError):
    def __init__(self, invocation: str, status: int, output: str = "") -> None:
        super().__init__(f"`{invocation}` resulted in non-zero exit code: {status}")
        self.invocation = invocation
        self.status = status
        self.output = output


class VulnerabilityError(PrepareAssetsError):
    def __init__(self, status: int) -> None:
        super().__init__(f"One or more critical packages are found: {status}")
        self.status = status


class MissingLockFileError(PrepareAssetsError):
    def __init__(self) -> None:
        super().__init__("No lock file is found.")
