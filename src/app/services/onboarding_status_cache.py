from collections import OrderedDict
from threading import Lock
from uuid import UUID


class OnboardingStatusCache:
    """
    Remembers users whose onboarding is complete.

    The flag only ever goes from false to true, so a cached "complete" never
    goes stale. Incomplete users are not cached and are looked up again on
    their next request.
    """

    def __init__(self, max_entries: int = 10_000):
        self.max_entries = max_entries
        self._completed: "OrderedDict[UUID, bool]" = OrderedDict()
        self._lock = Lock()

    def is_completed(self, user_id: UUID) -> bool:
        with self._lock:
            if user_id in self._completed:
                self._completed.move_to_end(user_id)
                return True
            return False

    def mark_completed(self, user_id: UUID) -> None:
        with self._lock:
            self._completed[user_id] = True
            self._completed.move_to_end(user_id)
            while len(self._completed) > self.max_entries:
                self._completed.popitem(last=False)

    def __len__(self) -> int:
        return len(self._completed)
