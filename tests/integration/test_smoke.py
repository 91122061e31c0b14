"""
End-to-end smoke test: matcher output feeds the reducer, as the lessons do.
"""

from __future__ import annotations

from reducekit import (
    Driver,
    find_matching,
    fuzzy_match,
    match_name,
    match_records,
    reduce,
    total_batteries,
)
from reducekit.lab import DRIVER_RECORDS, DRIVERS


def test_counting_matches_with_reduce():
    exact = find_matching(DRIVERS, "Bobby")
    folded = match_name(DRIVERS, "bobby")
    prefixed = fuzzy_match(DRIVERS, "Sa")

    count = lambda items: reduce(items, lambda total, _: total + 1, 0)  # noqa: E731

    assert count(exact) == 1
    assert count(folded) == 2
    assert count(prefixed) == 3


def test_collecting_hometowns_of_matching_records():
    matches = match_records(DRIVER_RECORDS, "Bobby")
    hometowns = reduce(matches, lambda acc, record: acc + [record["hometown"]], [])
    assert hometowns == ["Pittsburgh", "Tampa Bay"]


def test_records_as_models_round_through_matcher():
    models = [Driver(**record) for record in DRIVER_RECORDS]
    assert [d.hometown for d in match_records(models, "Bobby")] == ["Pittsburgh", "Tampa Bay"]


def test_lab_batteries_total():
    assert total_batteries() == 31
