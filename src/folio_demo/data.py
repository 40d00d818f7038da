"""Demo data definitions for a small, fictional investment portfolio.

All data is fictional and used for demonstration purposes only.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

RANDOM_SEED = 42


@dataclass(frozen=True)
class SecurityDef:
    """Definition for a security."""

    key: str
    name: str
    isin: str
    ticker_symbol: Optional[str] = None


@dataclass(frozen=True)
class ClassificationDef:
    """Definition for a classification node."""

    id: str
    name: str
    parent_id: Optional[str]
    rank: int = 0
    description: Optional[str] = None


@dataclass(frozen=True)
class AssignmentDef:
    """Share of a security (in percent) assigned to a classification."""

    classification_id: str
    security_key: str
    percent: Decimal


@dataclass(frozen=True)
class TransactionDef:
    """Definition for a cash account transaction."""

    date: datetime
    type: str  # AccountTransactionType member name
    amount: int  # cents
    note: Optional[str] = None


DEMO_TAXONOMY_ID = "asset-classes"
DEMO_TAXONOMY_NAME = "Asset Classes"

DEMO_SECURITIES: list[SecurityDef] = [
    SecurityDef("world", "MSCI World ETF", "IE00B4L5Y983", "EUNL"),
    SecurityDef("em", "MSCI Emerging Markets ETF", "IE00BKM4GZ66", "IS3N"),
    SecurityDef("govt", "Euro Government Bond ETF", "IE00B4WXJJ64", "EUNH"),
    SecurityDef("mixed", "Balanced Allocation Fund", "LU0048578792"),
    SecurityDef("reit", "Global REIT ETF", "IE00B1FZS350", "IQQ6"),
]

DEMO_CLASSIFICATIONS: list[ClassificationDef] = [
    ClassificationDef("equity", "Equity", DEMO_TAXONOMY_ID, rank=3),
    ClassificationDef("equity-dev", "Developed Markets", "equity", rank=1),
    ClassificationDef("equity-em", "Emerging Markets", "equity"),
    ClassificationDef("debt", "Debt", DEMO_TAXONOMY_ID, rank=2),
    ClassificationDef("debt-govt", "Government Bonds", "debt", rank=1),
    ClassificationDef("debt-corp", "Corporate Bonds", "debt"),
    ClassificationDef(
        "real-estate",
        "Real Estate",
        DEMO_TAXONOMY_ID,
        rank=1,
        description="Listed real estate investment trusts",
    ),
    ClassificationDef("cash", "Cash", DEMO_TAXONOMY_ID),
]

DEMO_ASSIGNMENTS: list[AssignmentDef] = [
    AssignmentDef("equity-dev", "world", Decimal("100")),
    AssignmentDef("equity-em", "em", Decimal("100")),
    AssignmentDef("debt-govt", "govt", Decimal("100")),
    AssignmentDef("equity-dev", "mixed", Decimal("60")),
    AssignmentDef("debt-corp", "mixed", Decimal("40")),
    AssignmentDef("real-estate", "reit", Decimal("100")),
]

DEMO_ACCOUNT_NAME = "Broker Cash Account"


def _utc(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, 12, 0, tzinfo=timezone.utc)


DEMO_TRANSACTIONS: list[TransactionDef] = [
    TransactionDef(_utc(2024, 1, 2), "DEPOSIT", 1_000_000, "Initial deposit"),
    TransactionDef(_utc(2024, 1, 3), "BUY", 450_000, "MSCI World ETF"),
    TransactionDef(_utc(2024, 1, 3), "FEES", 990),
    TransactionDef(_utc(2024, 2, 1), "BUY", 150_000, "Euro Government Bond ETF"),
    TransactionDef(_utc(2024, 3, 15), "DIVIDENDS", 3_412, "MSCI World ETF"),
    TransactionDef(_utc(2024, 3, 15), "TAXES", 900),
    TransactionDef(_utc(2024, 4, 30), "INTEREST", 1_250),
    TransactionDef(_utc(2024, 6, 1), "TRANSFER_IN", 200_000, "From savings"),
    TransactionDef(_utc(2024, 7, 10), "SELL", 80_000, "Euro Government Bond ETF"),
    TransactionDef(_utc(2024, 9, 1), "REMOVAL", 50_000, "Withdrawal"),
    TransactionDef(_utc(2024, 12, 20), "TRANSFER_OUT", 100_000, "To savings"),
]
