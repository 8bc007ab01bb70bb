"""
polysched computes repeating meeting schedules for weighted relationship
networks, an approximation for the Polyamorous Scheduling problem.

Submodules:
 - coloring: Vizing edge colouring of weight layers and day balancing
 - network: layer decomposition, interleaving and bound metrics
 - schedule: the repeating cycle of days
 - io, generate, networkx, report: ingestion, sample networks and output
"""

from .network import (
    Network,
    get_approximation_limit,
    get_minimum_run,
    get_schedule_weight,
    optimized_schedule,
)
from .schedule import Day, Meetup, Schedule
from .version import __version__

__all__ = [
    "Day",
    "Meetup",
    "Network",
    "Schedule",
    "__version__",
    "get_approximation_limit",
    "get_minimum_run",
    "get_schedule_weight",
    "optimized_schedule",
]
