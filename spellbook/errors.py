class SpellbookError(Exception):
    """Base class for errors raised by the spellbook catalog."""


class SourceUnavailable(SpellbookError):
    def __init__(self, source, reason):
        super().__init__(f"cannot read spell source {source}: {reason}")
        self.source = str(source)
        self.reason = reason


class MalformedRow(SpellbookError):
    def __init__(self, reason, source="", line_number=0):
        location = f"{source}:{line_number}: " if source else ""
        super().__init__(f"{location}{reason}")
        self.reason = reason
        self.source = str(source)
        self.line_number = line_number


class ConfigError(SpellbookError):
    def __init__(self, path, reason):
        super().__init__(f"{path}: {reason}")
        self.path = str(path)
        self.reason = reason
