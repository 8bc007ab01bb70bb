"""
Command line driver

Examples:
```
python -m polysched example
python -m polysched input network.csv --json
python -m polysched performance --runs 10 --datapoints --seed 42
```
"""

import logging
import logging.config
import sys
from time import perf_counter_ns

import fire
import numpy as np

from polysched.config import DEFAULT_MAX_WEIGHT, PERFORMANCE_RUNS, PERFORMANCE_SIZES, logging_config
from polysched.generate import example_network, generate_matrix
from polysched.io import read_network
from polysched.network import Network
from polysched.report import build_report, render

logger = logging.getLogger("polysched.main")


def single_run(network: np.ndarray, names: list[str] | None, json: bool = False) -> str:
    planner = Network(network, names)
    schedule = planner.optimized_schedule()
    report = build_report(planner, schedule)
    logger.info(f"schedule {report.name}: {report.days} days, weight {report.weight}")
    if not report.within_bounds:
        logger.warning(f"schedule {schedule.name} weight {report.weight} is outside of its bounds")
    if json:
        return report.model_dump_json(indent=2)
    return render(planner, schedule, report)


def example(json: bool = False) -> None:
    """Schedule the built-in eight participant network"""
    network, names = example_network()
    print(single_run(network, names, json))


def input_file(file: str, json: bool = False) -> None:
    """Schedule a network read from a headered CSV file"""
    try:
        network, names = read_network(file)
    except FileNotFoundError:
        logger.error(f"Unable to access {file}, check that it exists and you have permissions to it.")
        sys.exit(1)
    except ValueError as e:
        logger.error(f"Invalid network file {file}: {e}")
        sys.exit(1)
    print(single_run(network, names, json))


def performance(
    runs: int = PERFORMANCE_RUNS,
    datapoints: bool = False,
    seed: int | None = None,
    max_weight: int = DEFAULT_MAX_WEIGHT,
) -> None:
    """Time `runs` random networks for each size from 10 to 250 participants

    With `datapoints`, prints `(size,milliseconds),` tuples instead of sentences.
    """
    rng = np.random.default_rng(seed)
    if not datapoints:
        print(f"{runs} runs of random networks with:\n")
    for size in PERFORMANCE_SIZES:
        start = perf_counter_ns()
        for _ in range(runs):
            Network(generate_matrix(size, max_weight, rng)).optimized_schedule()
        elapsed = (perf_counter_ns() - start) // 1_000_000
        print(f"({size},{elapsed})," if datapoints else f"{size} people took {elapsed} milliseconds")


def main() -> None:
    logging.config.dictConfig(logging_config)
    fire.Fire({"example": example, "input": input_file, "performance": performance})


if __name__ == "__main__":
    main()
