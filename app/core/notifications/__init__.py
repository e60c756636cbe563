"""Kiosk event notification planning."""

from .types import (
    Assignment,
    EventKind,
    EventPayload,
    GroupedAssignment,
    PlanError,
    PlanErrorCode,
    PlannedMessage,
    PlanningError,
    PlanResult,
)
from .grouping import group_by_barber, members_note, single_or_multi, staff_to_notify
from .planners import PLANNERS, plan
from .dispatch import BatchResult, DeliveryOutcome, dispatch_plan

__all__ = [
    # Types
    "Assignment",
    "EventKind",
    "EventPayload",
    "GroupedAssignment",
    "PlanError",
    "PlanErrorCode",
    "PlannedMessage",
    "PlanningError",
    "PlanResult",
    # Helpers
    "group_by_barber",
    "members_note",
    "single_or_multi",
    "staff_to_notify",
    # Planning
    "PLANNERS",
    "plan",
    # Delivery
    "BatchResult",
    "DeliveryOutcome",
    "dispatch_plan",
]
