import dataclasses

import pytest

from algorithms.bfs import bfs
from algorithms.dijkstra import dijkstra
from algorithms.step import Step, StepBuilder, StepKind


def test_step_fields_cannot_be_reassigned(sample_graph):
    step = next(iter(bfs(sample_graph, "n1")))
    with pytest.raises(dataclasses.FrozenInstanceError):
        step.description = "changed"


def test_step_containers_are_frozen(sample_graph):
    steps = list(dijkstra(sample_graph, "n1"))
    step = steps[-1]
    assert isinstance(step.visited, tuple)
    with pytest.raises(TypeError):
        step.distances["n1"] = 99
    with pytest.raises(TypeError):
        step.overlay["x"] = 1


def test_recorded_steps_do_not_see_later_mutation():
    sb = StepBuilder()
    sb.visited.append("a")
    sb.overlay["values"] = [1]
    first = sb.emit(StepKind.VISIT, "one")
    sb.visited.append("b")
    sb.overlay["values"].append(2)
    second = sb.emit(StepKind.VISIT, "two")
    assert first.visited == ("a",)
    assert first.overlay["values"] == (1,)
    assert second.visited == ("a", "b")
    assert (first.step_number, second.step_number) == (0, 1)


def test_sets_freeze_to_sorted_tuples():
    sb = StepBuilder()
    step = sb.emit(StepKind.START, "s", components={"n3", "n1"})
    assert step.overlay["components"] == ("n1", "n3")


def test_to_dict_renders_infinity(graph_from):
    g = graph_from([("A", "B", 1)])
    g.add_node("C", node_id="C")
    first = next(iter(dijkstra(g, "A")))
    d = first.to_dict()
    assert d["distances"]["C"] == "∞"
    assert d["kind"] == "start"


def test_default_mappings_are_empty_and_read_only():
    a, b = Step(), Step()
    assert dict(a.distances) == {} and dict(a.overlay) == {}
    with pytest.raises(TypeError):
        a.overlay["x"] = 1
    assert a == b
