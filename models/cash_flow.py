from datetime import date
from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class Frequency(str, Enum):
    ONCE = "Once"
    SEMI_MONTHLY = "SemiMonthly"
    MONTH_START = "MonthStart"
    MONTH_END = "MonthEnd"
    ANNUALLY = "Annually"


class CashFlow(BaseModel):
    """Template for a recurring or one-time movement of money.

    Positive amounts are inflows, negative amounts outflows. ``tax_rate`` is
    the fraction of ``amount`` withheld on every date the flow fires.
    """
    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    amount: float
    frequency: Frequency = Frequency.ONCE
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    tax_rate: float = Field(default=0.0, ge=0.0, lt=1.0)


class Account(BaseModel):
    """Opening balance plus the cash flows applied to it over a window.

    ``start_date`` and ``end_date`` are both inclusive.
    """
    model_config = ConfigDict(frozen=True)

    name: str
    balance: float = 0.0
    cash_flows: Tuple[CashFlow, ...] = ()
    start_date: date
    end_date: date

    @property
    def identity(self) -> str:
        # Accounts are the same account when their names match; balances and
        # flows are not part of identity.
        return self.name

    def with_cash_flow(self, cash_flow: CashFlow) -> "Account":
        return self.model_copy(update={"cash_flows": self.cash_flows + (cash_flow,)})
