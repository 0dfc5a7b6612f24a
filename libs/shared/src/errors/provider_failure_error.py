"""Provider Failure Error"""

from libs.shared.src.errors.domain_error import DomainError


class ProviderFailureError(DomainError):
    """Price provider still failing after every retry attempt"""

    code_default = "PROVIDER_FAILURE"

    def __init__(self, symbol: str, attempts: int, last_cause: str | None) -> None:
        super().__init__(f"Failed after {attempts} attempts: {last_cause}")
        self.symbol = symbol
        self.attempts = attempts
        self.last_cause = last_cause
