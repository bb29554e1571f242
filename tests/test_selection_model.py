"""
Tests for SelectionModel - option list, selection flags, ids and summary
"""

import logging

import pytest

from multiselect.models import (
    SelectionModel,
    SelectionError,
    OutOfRangeError,
    IllegalStateError,
)


@pytest.fixture
def model(abc_labels):
    m = SelectionModel()
    m.set_items(abc_labels)
    return m


class TestSetItems:

    @pytest.mark.parametrize("labels", [[], ["a"], ["a", "b", "c"], ["x", "x", "y"]])
    def test_starts_with_nothing_selected(self, labels):
        m = SelectionModel()
        m.set_items(labels)
        assert m.get_selected_labels() == []
        assert m.get_selected_indices() == []
        assert m.build_summary() == ""
        assert len(m) == len(labels)

    def test_resets_previous_selection(self, model):
        model.set_selection_by_index([0, 2])
        model.set_items(["d", "e"])
        assert model.get_selected_indices() == []
        assert model.get_items() == ["d", "e"]

    def test_accepts_any_iterable(self):
        m = SelectionModel()
        m.set_items(label for label in ("a", "b"))
        assert m.get_items() == ["a", "b"]

    def test_input_is_copied(self):
        labels = ["a", "b"]
        m = SelectionModel()
        m.set_items(labels)
        labels.append("c")
        assert m.get_items() == ["a", "b"]

    def test_outputs_are_fresh_lists(self, model):
        model.toggle(0, True)
        model.get_items().append("zzz")
        model.get_selected_labels().append("zzz")
        model.get_selected_indices().append(99)
        assert model.get_items() == ["a", "b", "c"]
        assert model.get_selected_labels() == ["a"]
        assert model.get_selected_indices() == [0]

    def test_fresh_model_is_empty(self):
        m = SelectionModel()
        assert len(m) == 0
        assert m.get_selected_labels() == []
        assert m.build_summary() == ""
        assert m.get_ids() is None


class TestToggle:

    @pytest.mark.parametrize("index", [0, 1, 2])
    def test_select_then_deselect(self, model, index):
        model.toggle(index, True)
        assert model.get_selected_indices().count(index) == 1
        model.toggle(index, True)
        assert model.get_selected_indices().count(index) == 1
        model.toggle(index, False)
        assert index not in model.get_selected_indices()

    @pytest.mark.parametrize("index", [-1, 3, 100])
    def test_out_of_range_leaves_flags_unchanged(self, model, index):
        model.toggle(1, True)
        with pytest.raises(OutOfRangeError) as exc_info:
            model.toggle(index, True)
        assert exc_info.value.index == index
        assert exc_info.value.count == 3
        assert model.get_selected_indices() == [1]

    def test_out_of_range_is_an_index_error(self, model):
        with pytest.raises(IndexError):
            model.toggle(5, False)

    def test_toggle_without_items(self):
        with pytest.raises(OutOfRangeError):
            SelectionModel().toggle(0, True)


class TestSetSelectionByLabel:

    def test_additive(self, model):
        model.set_selection_by_label(["b"])
        assert model.get_selected_indices() == [1]
        model.set_selection_by_label(["a"])
        assert model.get_selected_indices() == [0, 1]

    def test_unknown_labels_ignored(self, model):
        model.set_selection_by_label(["zzz", "c"])
        assert model.get_selected_indices() == [2]

    def test_duplicate_label_selects_first_match(self):
        m = SelectionModel()
        m.set_items(["x", "y", "x"])
        m.set_selection_by_label(["x"])
        assert m.get_selected_indices() == [0]

    def test_exact_match_only(self, model):
        model.set_selection_by_label(["A", "b "])
        assert model.get_selected_indices() == []


class TestSetSelectionByIndex:

    def test_selects_indices(self, model):
        model.set_selection_by_index([2, 0])
        assert model.get_selected_indices() == [0, 2]

    def test_additive(self, model):
        model.set_selection_by_index([1])
        model.set_selection_by_index([2])
        assert model.get_selected_indices() == [1, 2]

    def test_partial_application_before_bad_index(self, model):
        with pytest.raises(OutOfRangeError):
            model.set_selection_by_index([0, 5, 1])
        assert model.get_selected_indices() == [0]

    def test_negative_index_rejected(self, model):
        with pytest.raises(OutOfRangeError):
            model.set_selection_by_index([-1])
        assert model.get_selected_indices() == []

    @pytest.mark.parametrize("labels", [[], ["only"], ["a", "b", "c", "d"], ["dup", "dup"]])
    def test_select_everything_returns_all_labels(self, labels):
        m = SelectionModel()
        m.set_items(labels)
        m.set_selection_by_index(range(len(labels)))
        assert m.get_selected_labels() == labels


class TestQueries:

    def test_labels_in_option_order(self, model):
        model.toggle(2, True)
        model.toggle(0, True)
        assert model.get_selected_labels() == ["a", "c"]

    def test_summary(self, model):
        model.set_selection_by_index([0, 2])
        assert model.build_summary() == "a, c"

    def test_summary_single(self, model):
        model.toggle(1, True)
        assert model.build_summary() == "b"

    def test_summary_custom_separator(self, abc_labels):
        m = SelectionModel(separator=" | ")
        m.set_items(abc_labels)
        m.set_all(True)
        assert m.build_summary() == "a | b | c"

    def test_is_selected(self, model):
        model.toggle(1, True)
        assert model.is_selected(1)
        assert not model.is_selected(0)
        with pytest.raises(OutOfRangeError):
            model.is_selected(3)

    def test_set_all_and_clear(self, model):
        model.set_all(True)
        assert model.selected_count() == 3
        model.clear_selection()
        assert model.selected_count() == 0
        assert model.get_selected_indices() == []


class TestSelectedIds:

    def test_requires_ids(self, model):
        model.toggle(1, True)
        with pytest.raises(IllegalStateError):
            model.get_selected_ids()

    def test_returns_ids_of_selected(self, model):
        model.set_ids([10, 20, 30])
        model.toggle(1, True)
        assert model.get_selected_ids() == [20]

    def test_ids_before_items(self):
        m = SelectionModel()
        m.set_ids([10, 20, 30])
        m.set_items(["a", "b", "c"])
        m.set_selection_by_index([0, 2])
        assert m.get_selected_ids() == [10, 30]

    def test_length_mismatch(self, model):
        model.set_ids([10, 20])
        with pytest.raises(IllegalStateError):
            model.get_selected_ids()

    def test_set_ids_does_not_validate(self, model):
        model.set_ids([1, 2, 3, 4, 5])
        assert model.get_ids() == [1, 2, 3, 4, 5]

    def test_mismatch_after_items_replaced(self, model):
        model.set_ids([10, 20, 30])
        model.set_items(["a"])
        with pytest.raises(IllegalStateError):
            model.get_selected_ids()

    def test_ids_copied_in(self, model):
        ids = [10, 20, 30]
        model.set_ids(ids)
        ids.append(40)
        model.set_all(True)
        assert model.get_selected_ids() == [10, 20, 30]

    def test_is_selection_error(self, model):
        with pytest.raises(SelectionError):
            model.get_selected_ids()


class TestDebugLogging:

    def test_selection_updates_are_logged(self, model, caplog):
        with caplog.at_level(logging.DEBUG, logger="multiselect.models.selection_model"):
            model.toggle(1, True)
            model.set_selection_by_index([0])
            model.set_selection_by_label(["c"])
            model.set_all(False)
        messages = [r.getMessage() for r in caplog.records]
        assert "Option 1 toggled to True" in messages
        assert "Selected by index, now [0, 1]" in messages
        assert "Selected by label, now [0, 1, 2]" in messages
        assert "All 3 option(s) set to False" in messages
