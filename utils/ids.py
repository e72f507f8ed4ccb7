import time
import random
import string
from typing import Iterable


def create_id_with_prefix(prefix: str) -> str:
    # timestamp + 4 random chars
    stamp = int(time.time() * 1000)
    rand = ''.join(random.choices(string.ascii_lowercase + string.digits, k=4))
    return f"{prefix}_{stamp}_{rand}"


def create_unique_id(prefix: str, taken: Iterable[str]) -> str:
    """Like create_id_with_prefix, but guaranteed not to collide with `taken`."""
    taken = set(taken)
    candidate = create_id_with_prefix(prefix)
    while candidate in taken:
        candidate = create_id_with_prefix(prefix)
    return candidate
