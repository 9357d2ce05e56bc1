from __future__ import annotations

from bench_browser.core.filter_engine import filter_records
from bench_browser.core.record import Record
from bench_browser.core.selection_state import SelectionState


def _make_records():
    return [
        Record(id="MNIST", task="Image Classification", modalities="Images",
               area="Computer Vision", year_published="1998",
               description="Handwritten digits"),
        Record(id="SQuAD", task="Question Answering, Reading Comprehension",
               modalities="Texts", area="Natural Language Processing",
               year_published="2016"),
        Record(id="COCO", task="Object Detection, Image Classification",
               modalities="Images,Texts", area="Computer Vision, Graphics",
               year_published="2014"),
        Record(id="Untitled"),
    ]


def _ids(records):
    return [r.id for r in records]


def test_empty_selection_returns_input_unchanged():
    records = _make_records()
    result = filter_records(records, SelectionState())
    assert result is records


def test_query_is_case_insensitive_substring():
    records = _make_records()

    assert _ids(filter_records(records, SelectionState(query="mnist"))) == ["MNIST"]
    assert _ids(filter_records(records, SelectionState(query="DIGITS"))) == ["MNIST"]
    assert _ids(filter_records(records, SelectionState(query="vision"))) == ["MNIST", "COCO"]


def test_query_skips_missing_fields_and_ignores_other_fields():
    records = _make_records()
    # modalities is not a searchable field
    assert filter_records(records, SelectionState(query="texts")) == []
    assert _ids(filter_records(records, SelectionState(query="untitled"))) == ["Untitled"]


def test_query_is_not_trimmed():
    records = [Record(id="ab"), Record(id="a b")]
    assert _ids(filter_records(records, SelectionState(query=" b"))) == ["a b"]


def test_task_facet_splits_and_intersects():
    records = _make_records()
    state = SelectionState(task=frozenset({"Image Classification"}))
    assert _ids(filter_records(records, state)) == ["MNIST", "COCO"]

    state = SelectionState(task=frozenset({"Reading Comprehension", "Object Detection"}))
    assert _ids(filter_records(records, state)) == ["SQuAD", "COCO"]


def test_modality_facet_splits_and_intersects():
    records = _make_records()
    state = SelectionState(modality=frozenset({"Texts"}))
    assert _ids(filter_records(records, state)) == ["SQuAD", "COCO"]


def test_area_facet_matches_whole_value_only():
    records = [
        Record(id="first", task="Computer Vision, Graphics", area="Computer Vision, Graphics"),
        Record(id="second", task="Computer Vision", area="Computer Vision"),
    ]

    by_area = SelectionState(area=frozenset({"Computer Vision"}))
    assert _ids(filter_records(records, by_area)) == ["second"]

    by_task = SelectionState(task=frozenset({"Computer Vision"}))
    assert _ids(filter_records(records, by_task)) == ["first", "second"]


def test_year_facet_exact_match():
    records = _make_records()
    state = SelectionState(year=frozenset({"2014", "1998"}))
    assert _ids(filter_records(records, state)) == ["MNIST", "COCO"]


def test_empty_field_never_matches_active_facet():
    records = _make_records()
    for state in (
        SelectionState(task=frozenset({""})),
        SelectionState(area=frozenset({""})),
        SelectionState(year=frozenset({""})),
    ):
        assert "Untitled" not in _ids(filter_records(records, state))


def test_categories_combine_conjunctively():
    records = _make_records()
    state = SelectionState(
        task=frozenset({"Image Classification"}),
        year=frozenset({"2014"}),
    )
    assert _ids(filter_records(records, state)) == ["COCO"]

    state = state.with_query("mnist")
    assert filter_records(records, state) == []


def test_adding_constraints_never_grows_result():
    records = _make_records()
    loose = SelectionState(modality=frozenset({"Images"}))
    tighter = loose.toggle("area", "Computer Vision", True)
    tightest = tighter.with_query("digits")

    loose_ids = set(_ids(filter_records(records, loose)))
    tighter_ids = set(_ids(filter_records(records, tighter)))
    tightest_ids = set(_ids(filter_records(records, tightest)))

    assert tightest_ids <= tighter_ids <= loose_ids


def test_category_independence():
    records = _make_records()
    base = SelectionState(year=frozenset({"2014"}))
    with_task = base.toggle("task", "Question Answering", True)

    # Year predicate still accepts/rejects the same records on its own
    year_only = set(_ids(filter_records(records, base)))
    combined = set(_ids(filter_records(records, with_task)))
    assert combined <= year_only


def test_result_preserves_original_order():
    records = list(reversed(_make_records()))
    state = SelectionState(modality=frozenset({"Images"}))
    assert _ids(filter_records(records, state)) == ["COCO", "MNIST"]


def test_end_to_end_scenario():
    records = [
        Record(id="A", task="X,Y", area="P"),
        Record(id="B", task="Y", area="Q"),
    ]
    state = SelectionState()

    state = state.toggle("task", "X", True)
    assert _ids(filter_records(records, state)) == ["A"]

    state = state.toggle("task", "X", False).toggle("task", "Y", True)
    assert _ids(filter_records(records, state)) == ["A", "B"]

    state = state.toggle("area", "Q", True)
    assert _ids(filter_records(records, state)) == ["B"]

    state = state.cleared()
    assert filter_records(records, state) is records
