from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional

from models.cash_flow import CashFlow


@dataclass(frozen=True)
class Payment:
    """One dated occurrence of a cash flow.

    ``label`` is the display name: the flow's name for the principal, or
    ``"<name> Tax"`` for a withholding derived from the flow's tax rate.
    """
    date: date
    amount: float
    cash_flow: CashFlow
    label: Optional[str] = None

    @property
    def cash_flow_name(self) -> Optional[str]:
        return self.label


@dataclass(frozen=True)
class AccountBalance:
    date: date
    account_name: str
    balance: float


@dataclass
class SimulationResult:
    balances: List[AccountBalance] = field(default_factory=list)
    payments: List[Payment] = field(default_factory=list)
