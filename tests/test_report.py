import json

from polysched import Network
from polysched.report import build_report, render


def test_report(star):
    network = Network(star, ["hub", "x", "y", "z"])
    schedule = network.optimized_schedule()
    report = build_report(network, schedule)
    assert report.name == schedule.name
    assert report.participants == 4
    assert report.relationships == 3
    assert report.days == 4
    assert report.weight == 8
    assert report.lower_bound == 3
    assert report.approximation_limit == 18
    assert report.performance == 266
    assert report.within_bounds
    assert json.loads(report.model_dump_json())["weight"] == 8


def test_empty_report():
    network = Network([[0, 0], [0, 0]])
    report = build_report(network, network.optimized_schedule())
    assert report.days == 0
    assert report.performance == 0
    assert report.within_bounds


def test_render(star):
    network = Network(star, ["hub", "x", "y", "z"])
    schedule = network.optimized_schedule()
    text = render(network, schedule, build_report(network, schedule))
    assert "Network Matrix Provided" in text
    assert "hub and z meet" in text
    assert "Maximum Strain Endured:\t\t8" in text
    assert "Hypothetical Performance:\t266% of Lower Bound for Optimal Run" in text
