from __future__ import annotations

import time
from typing import Callable, Optional


def epoch_millis() -> int:
    return int(time.time() * 1000)


def timestamp_id(prefix: str, *, clock: Optional[Callable[[], int]] = None) -> str:
    """Build an opaque record id such as ``emp-1718000000000``.

    Unique as long as two records of the same kind are not created within the
    same millisecond.
    """

    now_ms = (clock or epoch_millis)()
    return f"{prefix}-{now_ms}"
