from collections.abc import Sized
from typing import Any


def is_empty(value: Any) -> bool:
    """
    Whether a field value counts as "nothing entered yet".

    `None` and zero-length values (``""``, ``b""``, ``[]``, ``{}``...) are empty.
    Numbers and booleans are always present, so ``0`` and ``False`` are real values.
    """
    if value is None:
        return True
    if isinstance(value, Sized):
        return len(value) == 0
    return False
