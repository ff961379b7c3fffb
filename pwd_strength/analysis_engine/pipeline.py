"""
Evaluation pipeline: run sections in order, then score.

Single entrypoint for applications: evaluate_password_strength() runs the
blacklist, length, variety and pattern sections, collects their reasons and,
when every section ran, computes the score. A cancellation signal is polled
before each section; sections themselves are never interrupted.

evaluate_password_strength_async() wraps the same evaluation for event-loop
callers and delivers the result through a single-slot sink.
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from enum import Enum
from typing import Protocol, Union

from pydantic import SecretStr

from pwd_strength.analysis_engine.models import (
    PasswordEvaluation,
    SectionOutcome,
    SectionStatus,
)
from pwd_strength.analysis_engine.scorer import compute_score
from pwd_strength.analysis_engine.sections import Section, build_sections
from pwd_strength.blacklist.store import BlacklistStore
from pwd_strength.config.env import get_evaluation_delay_sec
from pwd_strength.core.cancellation import CancellationSignal
from pwd_strength.pwd_logging import get_logger

logger = get_logger(__name__)

REASON_CANCELLED = "Evaluation cancelled"
REASON_ERROR = "Error"

PasswordInput = Union[str, SecretStr]


class EvaluationState(str, Enum):
    RUNNING = "running"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    FAULTED = "faulted"


class ResultSink(Protocol):
    """Receives one evaluation; asyncio.Queue(maxsize=1) fits."""

    def put_nowait(self, item: PasswordEvaluation) -> None: ...


def _expose(password: PasswordInput) -> str:
    if isinstance(password, SecretStr):
        return password.get_secret_value()
    return password


def _run_section(section: Section, password: str) -> SectionOutcome:
    """Run one section; an unexpected exception counts as a fatal outcome."""
    try:
        return section.analyze(password)
    except Exception as e:
        # Exception text may echo the input, so only the type is logged
        logger.error(
            "evaluation_section_raised",
            section=section.name,
            error_type=type(e).__name__,
        )
        return SectionOutcome.fatal()


class PasswordEvaluator:
    """
    Runs an ordered, fixed list of sections over a password.

    Holds no per-evaluation state, so one instance can serve concurrent
    evaluations. Sections default to build_sections(store).
    """

    def __init__(
        self,
        store: BlacklistStore | None = None,
        sections: Sequence[Section] | None = None,
    ) -> None:
        self.store = store if store is not None else BlacklistStore()
        self.sections: tuple[Section, ...] = (
            tuple(sections) if sections is not None else build_sections(self.store)
        )

    def evaluate(
        self,
        password: PasswordInput,
        cancel: CancellationSignal | None = None,
    ) -> PasswordEvaluation:
        pwd = _expose(password)
        reasons: list[str] = []
        state = EvaluationState.RUNNING

        for section in self.sections:
            if cancel is not None and cancel.is_cancelled():
                reasons.append(REASON_CANCELLED)
                state = EvaluationState.CANCELLED
                logger.info("evaluation_cancelled", before_section=section.name)
                break

            outcome = _run_section(section, pwd)
            if outcome.status is SectionStatus.FATAL:
                reasons.append(REASON_ERROR)
                state = EvaluationState.FAULTED
                logger.error("evaluation_section_fatal", section=section.name)
                break
            if outcome.status is SectionStatus.FAILED:
                reasons.append(outcome.reason or REASON_ERROR)
        else:
            state = EvaluationState.COMPLETED

        if state is not EvaluationState.COMPLETED:
            return PasswordEvaluation(score=None, reasons=tuple(reasons))

        score = compute_score(pwd, reasons)
        evaluation = PasswordEvaluation(score=score, reasons=tuple(reasons))
        logger.debug(
            "evaluation_completed",
            score=score.value,
            strength=evaluation.strength.value,
            reason_count=len(reasons),
        )
        return evaluation


def evaluate_password_strength(
    password: PasswordInput,
    store: BlacklistStore | None = None,
    cancel: CancellationSignal | None = None,
) -> PasswordEvaluation:
    """
    Evaluate password strength with the default sections.

    Args:
        password: Password as str or pydantic SecretStr; never logged or kept.
        store: Loaded blacklist. None behaves like an uninitialized store:
            nothing is reported as blacklisted.
        cancel: Optional signal polled before each section.

    Returns:
        PasswordEvaluation; score is None if cancelled or a section faulted.
    """
    return PasswordEvaluator(store).evaluate(password, cancel)


async def evaluate_password_strength_async(
    password: PasswordInput,
    store: BlacklistStore | None,
    cancel: CancellationSignal,
    sink: ResultSink,
    *,
    delay_sec: float | None = None,
) -> None:
    """
    Wait delay_sec (default PWD_EVALUATION_DELAY_SEC), evaluate, and put the
    result into sink. Delivery failure is logged and not retried.
    """
    logger.info("evaluation_about_to_start")
    delay = get_evaluation_delay_sec() if delay_sec is None else delay_sec
    await asyncio.sleep(delay)

    evaluation = evaluate_password_strength(password, store, cancel)

    try:
        sink.put_nowait(evaluation)
    except Exception as e:
        # Consumer gone or full; delivery is fire-and-forget
        logger.error(
            "evaluation_delivery_failed",
            error_type=type(e).__name__,
            strength=evaluation.strength.value,
        )
