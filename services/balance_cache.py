"""
Balance Cache — Memoized Day-by-Day Balances

balance(d) = balance(d - 1) + net flows on d, with the opening balance for
any day before the account starts. Entries are keyed by (account identity,
date). A cache belongs to one simulation run and is discarded with it.
"""
import threading
from collections import OrderedDict
from datetime import date
from typing import Optional, Tuple

from models.cash_flow import Account
from services.account_service import net_flow_at
from utils.dates import ONE_DAY

CacheKey = Tuple[str, date]


class BalanceCache:
    """Memo of running balances with optional least-recently-used eviction.

    ``max_entries`` of ``None`` or 0 means unbounded.
    """

    def __init__(self, max_entries: Optional[int] = None):
        self.max_entries = max_entries or None
        self._entries: "OrderedDict[CacheKey, float]" = OrderedDict()
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def __len__(self):
        with self._lock:
            return len(self._entries)

    def __contains__(self, key):
        with self._lock:
            return key in self._entries

    def get(self, key: CacheKey) -> Optional[float]:
        with self._lock:
            value = self._entries.get(key)
            if value is None:
                self.misses += 1
                return None
            self._entries.move_to_end(key)
            self.hits += 1
            return value

    def put(self, key: CacheKey, balance: float) -> None:
        with self._lock:
            self._entries[key] = balance
            self._entries.move_to_end(key)
            if self.max_entries is not None:
                while len(self._entries) > self.max_entries:
                    self._entries.popitem(last=False)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def forget(self, identity: str) -> int:
        """Drop every memoized day of one account. Returns the count removed."""
        with self._lock:
            stale = [key for key in self._entries if key[0] == identity]
            for key in stale:
                del self._entries[key]
            return len(stale)

    def balance(self, account: Account, on_date: date) -> float:
        """Balance of ``account`` at the end of ``on_date``.

        Walks back to the nearest memoized day (or the account start), then
        folds forward one day at a time, memoizing each day on the way.
        """
        if on_date < account.start_date:
            return account.balance

        identity = account.identity
        running = account.balance
        pending = []
        day = on_date
        while True:
            cached = self.get((identity, day))
            if cached is not None:
                running = cached
                break
            pending.append(day)
            if day == account.start_date:
                break
            day -= ONE_DAY

        for day in reversed(pending):
            running += net_flow_at(account, day)
            self.put((identity, day), running)

        return running
