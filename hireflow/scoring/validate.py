"""Argument checks shared by the synthesizers."""

from __future__ import annotations

import math
from numbers import Real
from typing import Any, Iterable, List, Mapping, Optional

from ..errors import InvalidInputError
from .schema import CandidateInput


def require_text(value: Any, name: str) -> str:
    """Return ``value`` if it is a string, else raise InvalidInputError.

    The empty string is accepted.
    """
    if not isinstance(value, str):
        raise InvalidInputError(f"{name} must be a string, got {type(value).__name__}")
    return value


def _prior_score(value: Any, position: int) -> Optional[float]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidInputError(
            f"candidates[{position}].prior_score must be a number or None, "
            f"got {type(value).__name__}"
        )
    if not math.isfinite(value):
        raise InvalidInputError(f"candidates[{position}].prior_score must be finite, got {value}")
    return float(value)


def coerce_candidate(raw: Any, position: int) -> CandidateInput:
    """Normalise one ranking input into a :class:`CandidateInput`.

    Mappings may spell the prior score ``prior_score`` or ``ai_score``;
    ``ai_score`` is used when ``prior_score`` is absent or None.
    """
    if isinstance(raw, CandidateInput):
        cid, name, prior = raw.id, raw.name, raw.prior_score
    elif isinstance(raw, Mapping):
        if "id" not in raw:
            raise InvalidInputError(f"candidates[{position}] has no id")
        cid = raw["id"]
        name = raw.get("name")
        prior = raw.get("prior_score")
        if prior is None:
            prior = raw.get("ai_score")
    else:
        raise InvalidInputError(
            f"candidates[{position}] must be a CandidateInput or mapping, "
            f"got {type(raw).__name__}"
        )
    if cid is None:
        raise InvalidInputError(f"candidates[{position}].id is missing")
    require_text(name, f"candidates[{position}].name")
    return CandidateInput(id=str(cid), name=name, prior_score=_prior_score(prior, position))


def coerce_candidates(candidates: Any) -> List[CandidateInput]:
    """Normalise a whole ranking input list, in order."""
    if candidates is None or isinstance(candidates, (str, bytes, Mapping)) or not isinstance(candidates, Iterable):
        raise InvalidInputError("candidates must be a sequence of candidates")
    return [coerce_candidate(raw, i) for i, raw in enumerate(candidates)]
