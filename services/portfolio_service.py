### Portfolio overlay: a random return on the balance, weighted by asset.
import random
from typing import Optional, Tuple

from models.cash_flow import Account
from models.portfolio import Asset, Portfolio


def invest_asset(balance: float, asset: Asset, weight: float,
                 rng: Optional[random.Random] = None) -> float:
    """Income from the ``weight`` share of ``balance`` held in ``asset``."""
    rng = rng or random.Random()
    return (weight * balance) * (asset.mean_return + asset.std_dev * rng.random())


def invest(account: Account, portfolio: Portfolio,
           rng: Optional[random.Random] = None) -> Tuple[float, Account]:
    """Apply one period of portfolio returns to the account's balance.

    Returns the income and a copy of the account carrying the new balance;
    the given account is left as it was.
    """
    rng = rng or random.Random()
    income = 0.0
    for asset, weight in zip(portfolio.assets, portfolio.weights):
        income += invest_asset(account.balance, asset, weight, rng)
    return income, account.model_copy(update={"balance": account.balance + income})
