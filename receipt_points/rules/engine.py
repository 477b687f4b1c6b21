# receipt_points/rules/engine.py
from __future__ import annotations

from typing import Dict, NamedTuple

from ..logging import get_logger
from ..models import Receipt
from ..schemas import ScoreBreakdown
from .ruleset import RuleResult, ruleset

logger = get_logger(__name__)


class ScoreResult(NamedTuple):
    points: int
    steps: Dict[str, RuleResult]


def score_receipt(receipt: Receipt, count_underscore: bool = False) -> ScoreResult:
    """
    Run every rule once and sum the points.
    `steps` is keyed by breakdown field name, in rule order.
    """
    steps: Dict[str, RuleResult] = {}
    for key, rule in ruleset(count_underscore):
        steps[key] = rule(receipt)
    points = sum(r.points for r in steps.values())
    logger.debug("Scored receipt %s: %d points (%s)", receipt.id, points,
                 ", ".join(f"{k}={r.points}" for k, r in steps.items()))
    return ScoreResult(points, steps)


def build_breakdown(result: ScoreResult) -> ScoreBreakdown:
    """Fresh per-request trace of how each rule contributed."""
    fields: Dict[str, object] = {"result": result.points}
    for key, step in result.steps.items():
        if key == "descriptionMultiple":
            fields[key] = list(step.notes)
        elif step.notes:
            fields[key] = step.notes[0]
    return ScoreBreakdown(**fields)
