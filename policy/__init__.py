"""
Authorization policies.

Each policy answers "may this actor perform this action on this target?" and
nothing else. They keep no state and have no side effects.
"""

from policy.interfaces import Policy
from policy.user_policy import UserPolicy
from policy.project_policy import ProjectPolicy
from policy.timesheet_policy import TimesheetPolicy

__all__ = ["Policy", "UserPolicy", "ProjectPolicy", "TimesheetPolicy"]
