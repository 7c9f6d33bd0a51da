"""Domain services package."""

from .command_mapper import CommandPlan, plan_command, supported_commands

__all__ = ["CommandPlan", "plan_command", "supported_commands"]
