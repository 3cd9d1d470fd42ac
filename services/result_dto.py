from dataclasses import asdict, dataclass
from typing import List, Optional


@dataclass
class BalanceDTO:
    """Single day in the balance trajectory."""
    date: str  # ISO format YYYY-MM-DD
    account_name: str
    balance: float


@dataclass
class PaymentDTO:
    """Single payment, labelled with the cash flow that produced it."""
    date: str  # ISO format
    amount: float
    cash_flow_name: Optional[str]


@dataclass
class SimulationResponseDTO:
    """Complete simulation response."""
    balances: List[BalanceDTO]
    payments: List[PaymentDTO]

    @classmethod
    def from_result(cls, result):
        """Convert SimulationResult to JSON-serializable DTO."""
        return cls(
            balances=[
                BalanceDTO(
                    date=b.date.isoformat(),
                    account_name=b.account_name,
                    balance=b.balance,
                )
                for b in result.balances
            ],
            payments=[
                PaymentDTO(
                    date=p.date.isoformat(),
                    amount=p.amount,
                    cash_flow_name=p.cash_flow_name,
                )
                for p in result.payments
            ],
        )

    def to_dict(self):
        return asdict(self)


def result_to_dict(result):
    return SimulationResponseDTO.from_result(result).to_dict()
