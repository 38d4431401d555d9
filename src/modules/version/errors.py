class InvalidVersionFormat(ValueError):
    """Raised when a version string is not a dotted major.minor.build triplet."""

    def __init__(self, version: str, reason: str):
        self.version = version
        self.reason = reason
        super().__init__(f"Invalid version format '{version}': {reason}")
