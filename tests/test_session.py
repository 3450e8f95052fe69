import logging

import pytest

from algorithms.step import StepKind
from engine import KINDS, OPERATIONS, VisualizerSession
from engine.session import as_int, as_optional_text
from structures import EmptyStructure, InvalidInput, UnknownOperation


@pytest.fixture
def make_session(scheduler):
    def build(kind, sample=False):
        viz = VisualizerSession(kind, scheduler=scheduler)
        if sample:
            viz.run_operation("sample")
        return viz
    return build


def test_every_listed_operation_has_a_handler():
    for kind in KINDS:
        viz = VisualizerSession(kind)
        for op in OPERATIONS[kind]:
            name = f"_{kind.replace('-', '_')}_{op}"
            assert hasattr(viz, name) or hasattr(viz, f"_any_{op}"), name


def test_unknown_kind_and_operation():
    with pytest.raises(InvalidInput):
        VisualizerSession("skiplist")
    with pytest.raises(UnknownOperation, match="'fly' is not an operation on stack"):
        VisualizerSession("stack").run_operation("fly")


@pytest.mark.parametrize("raw, expected", [(5, 5), ("42", 42), (" -3 ", -3)])
def test_as_int_accepts(raw, expected):
    assert as_int(raw) == expected


@pytest.mark.parametrize("raw", ["abc", "", None, True, 1.5, "4.2"])
def test_as_int_rejects(raw):
    with pytest.raises(InvalidInput):
        as_int(raw)


def test_invalid_input_leaves_store_and_steps_untouched(make_session, caplog):
    viz = make_session("heap", sample=True)
    viz.run_operation("insert", value=5)
    steps_before = viz.playback.steps
    values_before = viz.store.values()
    with caplog.at_level(logging.WARNING, logger="engine.session"):
        with pytest.raises(InvalidInput, match="Please enter a valid number"):
            viz.run_operation("insert", value="abc")
    assert viz.store.values() == values_before
    assert viz.playback.steps is steps_before
    assert "rejected" in caplog.text


def test_empty_structure_keeps_previous_steps(make_session):
    viz = make_session("stack")
    viz.run_operation("push", value=1)
    viz.run_operation("pop")
    previous = viz.playback.steps
    with pytest.raises(EmptyStructure, match="Stack is empty!"):
        viz.run_operation("pop")
    assert viz.playback.steps is previous
    assert viz.console == ["Pushed 1", "Popped 1"]


@pytest.mark.parametrize("kind, op", [
    ("heap", "extract"), ("heap", "peek"), ("queue", "dequeue"), ("queue", "front"),
    ("queue", "rear"), ("stack", "peek"), ("bst", "traverse"), ("linked-list", "traverse"),
    ("graph", "bfs"), ("graph", "prim"),
])
def test_reads_on_empty_structures_raise(make_session, kind, op):
    with pytest.raises(EmptyStructure):
        make_session(kind).run_operation(op)


def test_operation_loads_playback_and_console(make_session):
    viz = make_session("bst", sample=True)
    result = viz.run_operation("traverse", order="preorder")
    assert result.steps is viz.playback.steps
    assert viz.playback.current_index == -1
    assert result.output == "Pre-order Traversal: 25 → 15 → 10 → 20 → 35 → 30 → 40"
    assert viz.console[-1] == result.output
    assert result.metrics.total_steps == len(result.steps)


def test_new_operation_cancels_running_playback(make_session, clock, scheduler):
    viz = make_session("queue", sample=True)
    viz.run_operation("enqueue", value=60)
    viz.playback.play()
    assert scheduler.active_count == 1
    viz.run_operation("dequeue")
    assert scheduler.active_count == 0
    assert viz.playback.current_index == -1


def test_scrubbing_never_mutates_the_store(make_session):
    viz = make_session("bst", sample=True)
    viz.run_operation("delete", value=25)
    after = viz.structure()
    for i in range(len(viz.playback.steps)):
        viz.playback.seek(i)
    viz.playback.seek(-1)
    assert viz.structure() == after


def test_edits_without_narration_reset_playback(make_session):
    viz = make_session("trie", sample=True)
    viz.run_operation("search", word="car")
    assert len(viz.playback.steps) > 0
    result = viz.run_operation("clear")
    assert len(result.steps) == 0
    assert len(viz.playback.steps) == 0
    assert viz.console[-1] == "Cleared trie"


def test_graph_session_flow(make_session):
    viz = make_session("graph")
    viz.run_operation("add_node", value="A", node_id="a")
    viz.run_operation("add_node", value="B", node_id="b")
    viz.run_operation("add_edge", source="a", target="b", weight="3")
    assert viz.console[-1] == "Added edge A - B (weight: 3)"
    result = viz.run_operation("dijkstra")
    assert result.steps.final.distances == {"a": 0, "b": 3}
    with pytest.raises(InvalidInput):
        viz.run_operation("bfs", start="zz")
    with pytest.raises(InvalidInput):
        viz.run_operation("add_edge", source="a", target="a")


def test_graph_sample_runs_every_engine(make_session):
    viz = make_session("graph", sample=True)
    assert viz.run_operation("prim").output == "MST Complete! Total weight: 12, Edges: 5"
    assert viz.run_operation("boruvka").output == "MST Complete! Total weight: 12, Edges: 5"
    assert viz.run_operation("bfs", start="n1").output == "BFS Complete: Visited 6 nodes"
    assert viz.run_operation("floyd_warshall").steps.final.is_final


def test_heap_set_type(make_session):
    viz = make_session("heap", sample=True)
    viz.run_operation("set_type", type="max")
    assert viz.store.values()[0] == 100
    assert viz.console[-1] == "Switched to Max Heap"
    with pytest.raises(InvalidInput):
        viz.run_operation("set_type", type="medium")


def test_hashtable_put_get(make_session):
    viz = make_session("hashtable")
    viz.run_operation("put", key="7", value="seven")
    result = viz.run_operation("get", key=7)
    assert result.output == "get(7) = seven"
    assert result.steps.final.kind is StepKind.FOUND


def test_linked_list_insert_positions(make_session):
    viz = make_session("linked-list", sample=True)
    viz.run_operation("insert", value=5, position="head")
    viz.run_operation("insert", value=25, position="index", index="3")
    assert viz.store.values() == [5, 10, 20, 25, 30, 40]
    with pytest.raises(InvalidInput):
        viz.run_operation("insert", value=1, position="index", index="x")


def test_session_to_dict(make_session):
    viz = make_session("stack", sample=True)
    viz.run_operation("peek")
    d = viz.to_dict()
    assert d["kind"] == "stack"
    assert d["playback"]["total_steps"] == 3
    assert d["console"] == ["Loaded sample stack", "Peek: 50"]


def test_argument_names_never_clash_with_parameters(make_session):
    viz = make_session("stack")
    viz.run_operation("push", value=2, op="pop", self="x")
    assert viz.store.values() == [2]


@pytest.mark.parametrize("raw, expected", [(None, None), ("", None), ("  ", None), (5, "5"), (" a ", "a")])
def test_as_optional_text(raw, expected):
    assert as_optional_text(raw) == expected


def test_add_node_coerces_label_and_id(make_session):
    viz = make_session("graph")
    viz.run_operation("add_node", value="A", label=5, node_id=7)
    node = viz.store.get_node("7")
    assert node.label == "5"
    viz.run_operation("add_node", value="B", label="")
    assert len(viz.store.nodes) == 2
    with pytest.raises(InvalidInput):
        viz.run_operation("add_node", value="C", label=["x"])
    assert len(viz.store.nodes) == 2
