from __future__ import annotations

import logging
import os

from pydantic import BaseModel, ConfigDict

LOGGER = logging.getLogger(__name__)

EXTRA_ENV = "DELTAHTML_EXTRA"
_EXTRA_MODES = ("forbid", "ignore", "allow")


def _extra_policy(default: str = "forbid") -> str:
    """How Delta JSON with unknown keys (e.g. ``{"insert": "x", "id": 3}``) is treated.

    ``forbid`` rejects such ops, ``ignore`` drops the keys and ``allow`` keeps
    them on the model. Read once, from ``DELTAHTML_EXTRA``, when the models are
    imported.
    """
    mode = os.getenv(EXTRA_ENV, "").strip().lower()
    if not mode:
        return default
    if mode not in _EXTRA_MODES:
        LOGGER.warning(
            "deltahtml.models.extra_policy.unknown %s=%r, using %r",
            EXTRA_ENV,
            mode,
            default,
        )
        return default
    return mode


class DeltaModel(BaseModel):
    """Immutable base for ops and their parts."""

    model_config = ConfigDict(extra=_extra_policy(), frozen=True)


__all__ = ["DeltaModel", "EXTRA_ENV"]
