import csv

import pytest

from citysaver.business_objects import Item
from citysaver.planning.solvers.dp import optimize
from citysaver.planning.tracker import Tracker
from citysaver.quality_metrics.core import compute_global_metrics, cumulative_selection


def _rows(path):
    with open(path, newline="", encoding="utf-8") as f:
        return list(csv.DictReader(f))


def test_global_metrics(abc_items):
    sol = optimize(abc_items, 5)
    m = compute_global_metrics(abc_items, sol)
    assert m["Total Value"] == 40
    assert m["Used Weight"] == 4
    assert m["Remaining Capacity"] == 1
    assert m["Utilization"] == pytest.approx(80.0)
    assert m["Chosen Items"] == 1
    assert m["Total Items"] == 3
    assert m["Total Possible Value"] == 80
    assert m["Value Share"] == pytest.approx(50.0)


def test_global_metrics_zero_denominators():
    sol = optimize([], 0)
    m = compute_global_metrics([], sol)
    assert m["Utilization"] == 0.0
    assert m["Value Share"] == 0.0


def test_cumulative_selection():
    items = [Item("x", 2, 5), Item("y", 3, 7)]
    rows = cumulative_selection(optimize(items, 5))
    assert [(r["name"], r["cumulative_weight"], r["cumulative_value"]) for r in rows] == [
        ("x", 2, 5),
        ("y", 5, 12),
    ]


def test_tracker_writes_artifacts(tmp_path, abc_items):
    sol = optimize(abc_items, 5)
    tracker = Tracker(out_dir=str(tmp_path / "out"))
    paths = tracker.write_all(abc_items, sol)

    assert len(paths) == 3
    items_rows = _rows(paths[0])
    assert [(r["name"], r["chosen"]) for r in items_rows] == [("A", "0"), ("B", "1"), ("C", "0")]

    selection_rows = _rows(paths[1])
    assert [r["name"] for r in selection_rows] == ["B"]
    assert selection_rows[0]["cumulative_value"] == "40"

    summary = {r["metric"]: r["value"] for r in _rows(paths[2])}
    assert summary["Total Value"] == "40"
    assert float(summary["Utilization"]) == pytest.approx(80.0)


def test_tracker_flags_only_the_chosen_twin(tmp_path):
    twin_a = Item("Springfield", 11, 100)
    twin_b = Item("Springfield", 11, 100)
    items = [twin_a, twin_b]
    sol = optimize(items, 11)
    path = Tracker(out_dir=str(tmp_path)).write_items_csv(items, sol)
    assert sorted(r["chosen"] for r in _rows(path)) == ["0", "1"]


def test_tracker_flags_repeated_object_by_position(tmp_path):
    city = Item("Springfield", 11, 100)
    items = [city, city]
    sol = optimize(items, 11)
    assert sol.chosen_indices == (0,)
    path = Tracker(out_dir=str(tmp_path)).write_items_csv(items, sol)
    assert [r["chosen"] for r in _rows(path)] == ["1", "0"]
