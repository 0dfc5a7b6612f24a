"""Domain Error Base Class"""


class DomainError(Exception):
    """Base class for momentum domain errors

    Carries a human readable message plus a stable code that ends up in
    MomentumResultDTO.error_code when the error is converted to data.
    """

    code_default: str = "DOMAIN_ERROR"

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.code_default
