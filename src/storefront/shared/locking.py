"""Per-user serialization of cart and checkout commands.

A command handler runs inside a protean UnitOfWork that commits when the
handler returns, so the lock has to wrap ``current_domain.process`` rather
than live inside the handler.
"""

import threading
from contextlib import contextmanager

from protean.utils.globals import current_domain

_registry_lock = threading.Lock()

# user id -> [lock, number of threads holding or waiting on it]
_user_locks: dict[str, list] = {}


@contextmanager
def user_lock(user_id):
    """Hold the lock that serializes writes for ``user_id``.

    The entry is dropped once no thread holds or waits on it, so the registry
    only grows with the number of users writing at the same moment.
    """
    key = str(user_id)
    with _registry_lock:
        entry = _user_locks.setdefault(key, [threading.RLock(), 0])
        entry[1] += 1
    try:
        with entry[0]:
            yield
    finally:
        with _registry_lock:
            entry[1] -= 1
            if entry[1] == 0:
                del _user_locks[key]


def process_for_user(user_id, command):
    """Process ``command`` synchronously while holding the user's lock."""
    with user_lock(user_id):
        return current_domain.process(command, asynchronous=False)
