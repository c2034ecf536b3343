from __future__ import annotations

import logging
from typing import Protocol

from chispa.config import get_prelude_root

logger = logging.getLogger(__name__)

PRELUDE_SUFFIX = ".chispa"


class _HasEvalPrelude(Protocol):
    def eval_prelude(self, code: str) -> None:  # pragma: no cover - structural type
        ...


def load_prelude(itp: _HasEvalPrelude) -> None:
    """Evaluate every prelude file in name order.

    Raises FileNotFoundError if the prelude directory does not exist.
    """
    root = get_prelude_root()
    if not root.is_dir():
        raise FileNotFoundError(f"Prelude directory not found: {root}")
    for path in sorted(root.glob(f"*{PRELUDE_SUFFIX}")):
        logger.debug("loading prelude file %s", path)
        itp.eval_prelude(path.read_text(encoding="utf-8"))
