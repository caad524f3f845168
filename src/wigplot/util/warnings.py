"""
wigplot/util/warnings
~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

import warnings
from typing import Type


def warn(message: str, category: Type[Warning] = UserWarning, stacklevel: int = 3) -> None:
    """
    Emits a user-facing warning about questionable track options.

    Args:
        message (str): Warning message text.
        category (Type[Warning]): Warning category class. Defaults to UserWarning.
        stacklevel (int): Stacklevel to report, pointing past the calling helper. Defaults to 3.
    """
    warnings.warn(message, category=category, stacklevel=stacklevel)
