"""Patient Session - active patient list and selection for the dashboard.

Holds the currently loaded patient list and the selected index for the
lifetime of a dashboard session. The presentation layer owns one instance
(kept in ``st.session_state``) and passes it into its render functions.

Design Decisions:
1. The list is replaced wholesale on load; there is no partial merge
2. Imports are parsed before anything is replaced, so a failed import
   leaves the session untouched
3. Observers are notified synchronously after each successful change
"""

import logging
from typing import Callable, List, Optional, Sequence, Tuple, Union

from sepsiswatch.data.loader import ImportResult, parse_payload
from sepsiswatch.data.records import HR_HISTORY_LABELS, PatientRecord
from sepsiswatch.exceptions import SelectionIndexError

logger = logging.getLogger(__name__)

SessionObserver = Callable[["PatientSession"], None]


class PatientSession:
    """
    Active patient list and selection.

    Example:
        >>> from sepsiswatch.data.samples import get_sample_patients
        >>> session = PatientSession()
        >>> session.load_list(get_sample_patients())
        >>> session.select(2)
        >>> session.current().info.id
        'P003'
    """

    def __init__(self, patients: Optional[Sequence[PatientRecord]] = None):
        """
        Initialize the session.

        Args:
            patients: Optional initial patient list. If given, the first
                patient is selected.
        """
        self._patients: Tuple[PatientRecord, ...] = ()
        self._selected_index: Optional[int] = None
        self._observers: List[SessionObserver] = []

        if patients is not None:
            self.load_list(patients)

    @property
    def patients(self) -> Tuple[PatientRecord, ...]:
        return self._patients

    @property
    def selected_index(self) -> Optional[int]:
        return self._selected_index

    def __len__(self) -> int:
        return len(self._patients)

    def load_list(self, patients: Sequence[PatientRecord]) -> None:
        """
        Replace the held patient list.

        Selection resets to the first patient, or to no selection when the
        list is empty.
        """
        self._patients = tuple(patients)
        self._selected_index = 0 if self._patients else None
        logger.debug(f"Loaded {len(self._patients)} patients into session")
        self._notify()

    def select(self, index: int) -> None:
        """
        Select the patient at ``index``.

        Raises:
            SelectionIndexError: If ``index`` is not within the loaded list.
                The current selection is kept.
        """
        if isinstance(index, bool) or not isinstance(index, int):
            raise SelectionIndexError(f"Patient index must be an integer, got {index!r}")
        if not 0 <= index < len(self._patients):
            raise SelectionIndexError(
                f"Patient index {index} out of range for {len(self._patients)} patients"
            )

        self._selected_index = index
        logger.debug(f"Selected patient {self._patients[index].info.id} (index {index})")
        self._notify()

    def current(self) -> Optional[PatientRecord]:
        """Return the selected patient, or None if nothing is selected."""
        if self._selected_index is None:
            return None
        return self._patients[self._selected_index]

    def import_payload(
        self,
        raw_text: Union[str, bytes],
        skip_invalid: bool = False,
        history_length: int = len(HR_HISTORY_LABELS),
    ) -> ImportResult:
        """
        Import a payload and adopt it as the patient list.

        The payload is fully parsed first; on PatientImportError the
        session keeps its previous list and selection.

        Returns:
            The ImportResult, so callers can report skipped records.
        """
        result = parse_payload(
            raw_text, skip_invalid=skip_invalid, history_length=history_length
        )
        self.load_list(result.patients)
        return result

    def subscribe(self, observer: SessionObserver) -> Callable[[], None]:
        """
        Register an observer called with this session after each change.

        Returns:
            A callable that removes the observer.
        """
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def _notify(self) -> None:
        for observer in list(self._observers):
            observer(self)
