"""
Sequential saga runner used by checkout.

Steps run in order; when one raises, the compensations of the steps that
already completed run newest first and the original error is re-raised.
"""
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional

import structlog

from shared.observability import ecomm_saga_compensation_total

logger = structlog.get_logger(__name__)

StepFn = Callable[[dict], Awaitable[None]]


@dataclass
class SagaStep:
    name: str
    action: StepFn
    compensation: Optional[StepFn] = None


class SagaOrchestrator:
    def __init__(self):
        self.steps: list[SagaStep] = []

    def add_step(self, name: str, action: StepFn, compensation: Optional[StepFn] = None):
        self.steps.append(SagaStep(name, action, compensation))
        return self

    async def execute(self, ctx: dict):
        completed: list[SagaStep] = []
        for step in self.steps:
            try:
                await step.action(ctx)
            except Exception as e:
                ctx["failed_step"] = step.name
                logger.error("saga_step_failed", step=step.name, completed=len(completed), error=str(e))
                await self._compensate(completed, ctx)
                raise
            completed.append(step)
        return True

    async def _compensate(self, completed: list[SagaStep], ctx: dict):
        for step in reversed(completed):
            if step.compensation is None:
                continue
            try:
                await step.compensation(ctx)
            except Exception as e:
                # Keep going: the remaining compensations are independent
                logger.critical("saga_compensation_failed", step=step.name, error=str(e))
                ecomm_saga_compensation_total.labels(step_name=step.name, outcome="failed").inc()
                ctx.setdefault("compensation_failures", []).append(step.name)
            else:
                logger.info("saga_step_compensated", step=step.name)
                ecomm_saga_compensation_total.labels(step_name=step.name, outcome="ok").inc()
