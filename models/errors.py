class ConfigurationError(ValueError):
    """Raised when a cash flow lacks data its frequency or tax mode requires."""


class ScenarioError(ValueError):
    """Raised when a scenario document cannot be read or parsed."""
