"""
Selection Model - Options, selection flags and the summary string behind a multi-select spinner
"""

from typing import Any, Iterable, List, Optional
import logging

from multiselect.utils.constants import SUMMARY_SEPARATOR

logger = logging.getLogger(__name__)


class SelectionError(Exception):
    """Base class for selection model errors"""


class OutOfRangeError(SelectionError, IndexError):
    """Raised when an option index falls outside [0, N)"""

    def __init__(self, index: int, count: int):
        super().__init__(f"Index {index} is out of bounds for {count} option(s).")
        self.index = index
        self.count = count


class IllegalStateError(SelectionError, RuntimeError):
    """Raised when an id-based query is made before ids match the options"""


class UnsupportedOperationError(SelectionError):
    """Raised when something other than the selection model is offered as a data source"""


class SelectionModel:
    """Ordered options with index-aligned selection flags and optional ids.

    Inputs are copied in and outputs are copied out, so callers never hold a
    reference to the internal lists.
    """

    def __init__(self, separator: str = SUMMARY_SEPARATOR):
        self._items: List[str] = []
        self._selection: List[bool] = []
        self._ids: Optional[List[Any]] = None
        self._separator = separator

    def __len__(self) -> int:
        return len(self._items)

    def _check_index(self, index: int):
        if not 0 <= index < len(self._selection):
            raise OutOfRangeError(index, len(self._selection))

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def set_items(self, labels: Iterable[str]):
        """Replace the options and reset every flag to unselected"""
        self._items = list(labels)
        self._selection = [False] * len(self._items)
        logger.debug(f"Items set: {len(self._items)} option(s)")

    def set_ids(self, ids: Iterable[Any]):
        """Replace the id list. Length is only checked when ids are queried."""
        self._ids = list(ids)
        logger.debug(f"Ids set: {len(self._ids)} id(s)")

    def set_selection_by_label(self, labels: Iterable[str]):
        """Select the first option matching each label.

        Unknown labels are ignored and existing selections are kept.
        """
        for label in labels:
            for i, item in enumerate(self._items):
                if item == label:
                    self._selection[i] = True
                    break
            else:
                logger.debug(f"No option labelled {label!r}, ignoring")
        logger.debug(f"Selected by label, now {self.get_selected_indices()}")

    def set_selection_by_index(self, indices: Iterable[int]):
        """Select each index in turn.

        Stops with OutOfRangeError at the first bad index; earlier indices
        stay selected.
        """
        for index in indices:
            self._check_index(index)
            self._selection[index] = True
        logger.debug(f"Selected by index, now {self.get_selected_indices()}")

    def toggle(self, index: int, selected: bool):
        """Set the flag of one option, as reported by a choice event"""
        self._check_index(index)
        self._selection[index] = bool(selected)
        logger.debug(f"Option {index} toggled to {bool(selected)}")

    def set_all(self, selected: bool):
        """Set every flag to the same value"""
        self._selection = [bool(selected)] * len(self._items)
        logger.debug(f"All {len(self._items)} option(s) set to {bool(selected)}")

    def clear_selection(self):
        self.set_all(False)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_items(self) -> List[str]:
        return list(self._items)

    def get_ids(self) -> Optional[List[Any]]:
        return None if self._ids is None else list(self._ids)

    def is_selected(self, index: int) -> bool:
        self._check_index(index)
        return self._selection[index]

    def selected_count(self) -> int:
        return sum(1 for flag in self._selection if flag)

    def get_selected_labels(self) -> List[str]:
        """Labels of the selected options, in option order"""
        return [item for item, flag in zip(self._items, self._selection) if flag]

    def get_selected_indices(self) -> List[int]:
        """Positions of the selected options, ascending"""
        return [i for i, flag in enumerate(self._selection) if flag]

    def get_selected_ids(self) -> List[Any]:
        """Ids of the selected options, in option order.

        Raises:
            IllegalStateError: if set_ids was never called, or the id count
                differs from the option count
        """
        if self._ids is None:
            raise IllegalStateError("get_selected_ids requires set_ids to be called first")
        if len(self._ids) != len(self._items):
            raise IllegalStateError(
                f"The number of ids ({len(self._ids)}) should match "
                f"the number of items ({len(self._items)})"
            )
        return [id_ for id_, flag in zip(self._ids, self._selection) if flag]

    def build_summary(self) -> str:
        """Selected labels joined for display in the trigger control"""
        return self._separator.join(self.get_selected_labels())
