"""
Application-layer exceptions.

These exceptions are used across application and infrastructure layers.
The distribution algorithm itself never raises them.
"""


class CatalogLoadError(Exception):
    """Error loading the exercise catalog.

    Raised when the catalog file is missing, is not valid YAML, or holds
    entries that fail model validation.
    """

    pass


class UnknownExerciseError(LookupError):
    """Raised when a requested exercise ID or name is not in the catalog."""

    def __init__(self, identifiers):
        self.identifiers = list(identifiers)
        super().__init__(
            f"Unknown exercise(s): {', '.join(str(i) for i in self.identifiers)}"
        )
