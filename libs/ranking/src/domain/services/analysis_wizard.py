"""Analysis Wizard State Machine

Step 1 (dates) → Step 2 (buy search) → Step 3 (portfolio) → Results

Pure transition table; the current step is owned by the caller.
"""

from libs.shared.src.enums.analysis_step import AnalysisStep, WizardEvent
from libs.shared.src.errors.invalid_transition_error import InvalidTransitionError

_TRANSITIONS: dict[tuple[AnalysisStep, WizardEvent], AnalysisStep] = {
    (AnalysisStep.SELECTING_DATES, WizardEvent.DATES_CONFIRMED): AnalysisStep.SEARCHING_BUY,
    (AnalysisStep.SEARCHING_BUY, WizardEvent.BUY_FOUND): AnalysisStep.ANALYZING_PORTFOLIO,
    (AnalysisStep.SEARCHING_BUY, WizardEvent.BUY_NOT_FOUND): AnalysisStep.SEARCHING_BUY,
    (AnalysisStep.ANALYZING_PORTFOLIO, WizardEvent.PORTFOLIO_ANALYZED): AnalysisStep.RESULTS,
    (AnalysisStep.ANALYZING_PORTFOLIO, WizardEvent.EDIT_CANDIDATES): AnalysisStep.SEARCHING_BUY,
    (AnalysisStep.RESULTS, WizardEvent.EDIT_CANDIDATES): AnalysisStep.SEARCHING_BUY,
}

# Allowed from every step
_GLOBAL_TRANSITIONS: dict[WizardEvent, AnalysisStep] = {
    WizardEvent.EDIT_DATES: AnalysisStep.SELECTING_DATES,
    WizardEvent.START_OVER: AnalysisStep.SELECTING_DATES,
}

INITIAL_STEP = AnalysisStep.SELECTING_DATES


def advance(step: AnalysisStep, event: WizardEvent) -> AnalysisStep:
    """Next step for event

    Raises:
        InvalidTransitionError: event not allowed in step
    """
    if event in _GLOBAL_TRANSITIONS:
        return _GLOBAL_TRANSITIONS[event]
    try:
        return _TRANSITIONS[(step, event)]
    except KeyError:
        raise InvalidTransitionError(step.name, event.name) from None


def allowed_events(step: AnalysisStep) -> list[WizardEvent]:
    """Events accepted in step, in declaration order"""
    return [
        event
        for event in WizardEvent
        if event in _GLOBAL_TRANSITIONS or (step, event) in _TRANSITIONS
    ]
