"""Runtime helpers shared by the enforcement decorator."""

from .guard import bind_arguments, check_call, collect_checks, run_validators

__all__ = [
    "bind_arguments",
    "check_call",
    "collect_checks",
    "run_validators",
]
