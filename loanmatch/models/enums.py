"""Domain enums shared by the schemas and both engines.

All enums use the str mixin for JSON serialization. Questionnaire enums hold
the exact Norwegian labels the quiz offers; the schemas still accept any
string so unknown labels can fall through to defaults.
"""

from __future__ import annotations

from enum import Enum


class LoanAmountLabel(str, Enum):
    """Requested loan amount buckets."""

    KR_50K = "50.000 kr"
    KR_100K = "100.000 kr"
    KR_200K = "200.000 kr"
    KR_300K = "300.000 kr"
    KR_500K = "500.000 kr"
    OTHER = "Annet beløp"


class LoanPurpose(str, Enum):
    """What the loan is for."""

    REFINANCING = "Refinansiering"
    CAR = "Bil"
    RENOVATION = "Renovering"
    TRAVEL = "Ferie"
    WEDDING = "Bryllup"
    OTHER = "Annet"


class IncomeBracket(str, Enum):
    """Gross annual income brackets."""

    UNDER_300K = "Under 300.000 kr"
    FROM_300K_TO_500K = "300.000 - 500.000 kr"
    FROM_500K_TO_700K = "500.000 - 700.000 kr"
    FROM_700K_TO_1M = "700.000 - 1.000.000 kr"
    OVER_1M = "Over 1.000.000 kr"


class DebtBracket(str, Enum):
    """Existing debt brackets."""

    NONE = "Ingen gjeld"
    UNDER_100K = "Under 100.000 kr"
    FROM_100K_TO_300K = "100.000 - 300.000 kr"
    FROM_300K_TO_500K = "300.000 - 500.000 kr"
    OVER_500K = "Over 500.000 kr"


class EmploymentStatus(str, Enum):
    """How the applicant is employed; drives product eligibility."""

    PERMANENT = "Fast ansatt"
    TEMPORARY = "Midlertidig ansatt"
    SELF_EMPLOYED = "Selvstendig næringsdrivende"
    RETIRED = "Pensjonist"
    STUDENT = "Student"
    UNEMPLOYED = "Arbeidsledig"


class HousingStatus(str, Enum):
    """Housing situation (collected, not scored)."""

    OWNER = "Eier bolig"
    TENANT = "Leier bolig"
    WITH_PARENTS = "Bor hos foreldre"
    OTHER = "Annet"


class CreditTier(str, Enum):
    """Self-assessed credit history, best first."""

    EXCELLENT = "Meget god"
    GOOD = "God"
    FAIR = "Middels"
    POOR = "Dårlig"
    DELINQUENT = "Har betalingsanmerkninger"


class Language(str, Enum):
    """Supported reply locales."""

    NO = "no"
    EN = "en"


class MessageRole(str, Enum):
    """Author of a chat message."""

    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"


class Intent(str, Enum):
    """Purpose of a user chat message."""

    LOAN_INQUIRY = "loan_inquiry"
    LOAN_COMPARISON = "loan_comparison"
    CALCULATION = "calculation"
    APPLICATION_HELP = "application_help"
    GENERAL_ADVICE = "general_advice"
    GENERAL = "general"
    ERROR = "error"  # fallback reply after a render failure, never classified


class ActionType(str, Enum):
    """Kind of follow-up action attached to a reply."""

    NAVIGATE = "navigate"
    CALCULATE = "calculate"
    APPLY = "apply"
    LEARN_MORE = "learn_more"


class Topic(str, Enum):
    """Coarse conversation topic tag."""

    LOANS = "loans"
    SAVINGS = "savings"
    INVESTMENTS = "investments"
    INSURANCE = "insurance"
    GENERAL = "general"


class CreditScore(str, Enum):
    """Coarse credit score carried on a chat profile."""

    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"
