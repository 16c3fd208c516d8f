"""Reduction driver: repeats `evaluate_step` until a normal form is reached.

Every intermediate statement is remembered; producing one that was already
seen means the reduction is cycling and the driver stops. Divergence that
never repeats a state is not detected unless the caller passes `max_steps`.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import NamedTuple

from reduct.types.value import Value
from reduct.types.statement import is_statement
from reduct.types.error import is_error
from reduct.evaluation.evaluator import evaluate_step

logger = logging.getLogger(__name__)


class TerminalCondition(Enum):
    NORMAL_FORM = "normal-form"
    ERROR = "error"
    CYCLE_DETECTED = "cycle-detected"
    STEP_LIMIT = "step-limit"


class Reduction(NamedTuple):
    value: Value
    condition: TerminalCondition
    steps: int


def reduce(value: Value, max_steps: int | None = None) -> Reduction:
    visited: set[Value] = {value}
    current = value
    steps = 0
    while is_statement(current):
        if max_steps is not None and steps >= max_steps:
            logger.info("stopping after %d steps", steps)
            return Reduction(current, TerminalCondition.STEP_LIMIT, steps)

        current = evaluate_step(current)
        steps += 1
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("step %d: %s", steps, current)

        if current in visited:
            logger.info("cycle detected after %d steps", steps)
            return Reduction(current, TerminalCondition.CYCLE_DETECTED, steps)
        visited.add(current)

    if is_error(current):
        return Reduction(current, TerminalCondition.ERROR, steps)
    return Reduction(current, TerminalCondition.NORMAL_FORM, steps)
