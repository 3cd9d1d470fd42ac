import logging
import random
from typing import Optional

import settings
from models.cash_flow import Account
from models.portfolio import Portfolio
from models.simulation_dto import AccountBalance, SimulationResult
from services.account_service import flows_at
from services.balance_cache import BalanceCache
from services.portfolio_service import invest
from utils.dates import iter_days

logger = logging.getLogger(__name__)


def run_simulation(account: Account, portfolio: Optional[Portfolio] = None,
                   rng: Optional[random.Random] = None,
                   cache: Optional[BalanceCache] = None) -> SimulationResult:
    """Daily balances and payments from ``account.start_date`` to ``end_date``.

    Both ends of the window are sampled. An account whose start is after its
    end yields an empty result. With a portfolio, one period of returns is
    applied to the opening balance before the scan.
    """
    if portfolio is not None:
        income, account = invest(account, portfolio, rng)
        logger.info("Portfolio income for %s: %.2f", account.name, income)

    if cache is None:
        cache = BalanceCache(settings.BALANCE_CACHE_SIZE)
    elif portfolio is not None:
        # the overlay changed the opening balance under the same identity
        cache.forget(account.identity)

    logger.info("--- Beginning simulation for %s ---", account.name)
    results = SimulationResult()

    for day in iter_days(account.start_date, account.end_date):
        balance = cache.balance(account, day)
        logger.debug("%s, %s balance, %s", day, account.name, balance)
        results.balances.append(AccountBalance(day, account.name, balance))

        for payment in flows_at(account, day):
            logger.debug("%s, %s, %s", day, payment.cash_flow_name, payment.amount)
            results.payments.append(payment)

    logger.info(
        "--- End of simulation for %s: %d days, %d payments ---",
        account.name, len(results.balances), len(results.payments),
    )
    return results
