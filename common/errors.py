"""Exceptions raised by the statistics and generation modules."""


class EmptyInputError(ValueError):
    """A statistic or generator received an empty record set."""


class DegenerateFieldError(ValueError):
    """A field has zero spread (std or range), so the result is undefined."""

    def __init__(self, field: str, what: str = "standard deviation"):
        super().__init__(f"field '{field}' has zero {what}")
        self.field = field


class UnknownFieldError(ValueError):
    """The requested field is not part of a customer record."""

    def __init__(self, field: str):
        super().__init__(f"unknown record field: {field}")
        self.field = field
