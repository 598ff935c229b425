from typing import Optional


class RuleDefinitionException(ValueError):
    """
    Raised by `build_validator` in strict mode when a rule set cannot be used as written.

    Outside strict mode the same problems (a rule without `key` or `test`, a repeated key)
    are logged and the offending rule is skipped instead.
    """

    def __init__(self, message: str, *, index: Optional[int] = None, key: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.index = index
        self.key = key


class EnvInvalidException(ValueError):
    def __init__(self, env_name: str, value: str = None, supported_values: list[str] = None):
        message = f"[ENV INVALID] Invalid environment variable: `{env_name}`"
        if value:
            message += f" (value: `{value}`) "
        if supported_values:
            message += f" (supported values: {', '.join(supported_values)})"
        super().__init__(message)
