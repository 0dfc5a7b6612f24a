"""Invalid Wizard Transition Error"""

from libs.shared.src.errors.domain_error import DomainError


class InvalidTransitionError(DomainError):
    """Raised when an analysis wizard event is not allowed in the current step"""

    code_default = "INVALID_TRANSITION"

    def __init__(self, step: str, event: str) -> None:
        super().__init__(f"Event {event} is not allowed in step {step}")
        self.step = step
        self.event = event
