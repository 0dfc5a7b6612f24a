"""Analysis Wizard Step Enum"""

from enum import Enum


class AnalysisStep(Enum):
    """Analysis wizard step"""

    SELECTING_DATES = "selecting_dates"  # Step 1: pick the window
    SEARCHING_BUY = "searching_buy"  # Step 2: find best buy among candidates
    ANALYZING_PORTFOLIO = "analyzing_portfolio"  # Step 3: pick sell candidate
    RESULTS = "results"


class WizardEvent(Enum):
    """Analysis wizard event"""

    DATES_CONFIRMED = "dates_confirmed"
    BUY_FOUND = "buy_found"
    BUY_NOT_FOUND = "buy_not_found"
    PORTFOLIO_ANALYZED = "portfolio_analyzed"
    EDIT_DATES = "edit_dates"
    EDIT_CANDIDATES = "edit_candidates"
    START_OVER = "start_over"
