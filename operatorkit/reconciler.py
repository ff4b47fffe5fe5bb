"""Outcomes of a reconcile pass and status-condition bookkeeping."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, NoReturn, Optional, Protocol, Union, runtime_checkable

log = logging.getLogger("operator-utils.reconciler")

RUNNING_REASON = "Running"
SUCCESSFUL_REASON = "Successful"
FAILED_REASON = "Failed"
UNKNOWN_FAILED_REASON = "Unknown"

RUNNING_MESSAGE = "Running reconciliation"
SUCCESSFUL_MESSAGE = "Awaiting next reconciliation"


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Condition:
    """A status condition on a resource."""

    type: str
    status: str
    reason: str = ""
    message: str = ""
    last_transition_time: datetime = field(default_factory=_now)


@dataclass(frozen=True)
class Result:
    """How the controller should requeue the resource after a reconcile pass."""

    requeue: bool = False
    requeue_after: timedelta = timedelta(0)


@runtime_checkable
class ConditionsStatusAware(Protocol):
    """A resource whose status carries reconcile conditions."""

    def get_reconcile_status(self) -> list[Condition]:
        """Return the current reconcile conditions."""

    def set_reconcile_status(self, conditions: list[Condition]) -> None:
        """Replace the reconcile conditions."""


def _record(client: Any, obj: Any, condition: Condition) -> None:
    if not isinstance(obj, ConditionsStatusAware):
        log.info("object is not ReconcileStatusAware, not setting status")
        return
    obj.set_reconcile_status([condition])
    try:
        client.update_status(obj)
    except Exception:
        log.exception("unable to update status")
        raise


def manage_error(
    client: Any, obj: Any, issue: Optional[BaseException], is_retriable: bool
) -> Result:
    """Record a ReconcileError condition on ``obj``.

    A retriable issue is raised again so the resource is requeued; otherwise it
    is logged and an empty result is returned.
    """
    condition = Condition(
        type="ReconcileError",
        status="True",
        reason=FAILED_REASON,
        message=str(issue) if issue is not None else "",
    )
    _record(client, obj, condition)

    if is_retriable:
        if issue is not None:
            raise issue
        return Result()

    if issue is not None:
        log.error("reconciliation error", exc_info=issue)
    return Result()


def manage_success(client: Any, obj: Any) -> Result:
    """Record a ReconcileSuccess condition on ``obj`` and return an empty result."""
    condition = Condition(
        type="ReconcileSuccess",
        status="True",
        reason=SUCCESSFUL_REASON,
        message=SUCCESSFUL_MESSAGE,
    )
    _record(client, obj, condition)
    return Result()


def do_not_requeue() -> Result:
    """Return a result that does not requeue the resource."""
    return Result()


def requeue_with_error(err: BaseException) -> NoReturn:
    """Requeue the resource by raising ``err``."""
    raise err


def requeue_after(requeue_time: Union[timedelta, float]) -> Result:
    """Return a result that requeues the resource after ``requeue_time``.

    A plain number is taken as seconds.
    """
    if not isinstance(requeue_time, timedelta):
        requeue_time = timedelta(seconds=requeue_time)
    return Result(requeue=True, requeue_after=requeue_time)