"""
Statistics of a generated schedule against the bounds of its network, and the
console rendering used by the command line.
"""

from pydantic import BaseModel, Field

from polysched.network import Network
from polysched.schedule import Schedule


class ScheduleReport(BaseModel):
    name: str = Field(description="random name of the schedule")
    participants: int
    relationships: int
    days: int = Field(description="length of the repeating cycle")
    weight: int = Field(description="maximum strain endured by a relationship")
    lower_bound: int = Field(description="lower bound on the weight of an optimal schedule")
    approximation_limit: int = Field(description="upper bound guaranteed by the approximation")
    performance: int = Field(description="weight as integer percentage of the lower bound, 0 if the bound is 0")

    @property
    def within_bounds(self) -> bool:
        return self.lower_bound <= self.weight <= self.approximation_limit


def build_report(network: Network, schedule: Schedule) -> ScheduleReport:
    weight = network.get_schedule_weight(schedule)
    lower_bound = network.get_minimum_run()
    return ScheduleReport(
        name=schedule.name,
        participants=len(network),
        relationships=network.get_number_of_relationships(),
        days=len(schedule),
        weight=weight,
        lower_bound=lower_bound,
        approximation_limit=network.get_approximation_limit(),
        performance=int(weight / lower_bound * 100) if lower_bound else 0,
    )


def _banner(title: str) -> str:
    return f"/**********************/\n{title:^24}\n/**********************/\n"


def render(network: Network, schedule: Schedule, report: ScheduleReport) -> str:
    """Matrix, schedule and general statistics as printed by the command line"""
    return (
        _banner("Network Matrix Provided")
        + f"{network}\n\n"
        + _banner("Generated Schedule")
        + f"{schedule}\n"
        + _banner("General Statistics")
        + f"\nMaximum Strain Endured:\t\t{report.weight}"
        + f"\nOptimal Solution Lower Bound:\t{report.lower_bound}"
        + f"\nApproximation Limit:\t\t{report.approximation_limit}"
        + f"\nHypothetical Performance:\t{report.performance}% of Lower Bound for Optimal Run\n"
    )
