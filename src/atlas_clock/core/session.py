"""Interactive session state machine.

The controller owns the clock list and all view state. It consumes one
event at a time and never renders; callers re-render after every event.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Optional, Protocol, Sequence, Tuple

from atlas_clock.core import zones
from atlas_clock.core.events import Event, KeyPress, Resize, Tick
from atlas_clock.core.keys import BACKSPACE, DEFAULT_KEYMAP, KeyMap
from atlas_clock.core.models import SENTINEL_ZONES, ClockEntry
from atlas_clock.core.time_source import TimeSource
from atlas_clock.error_handling import InvalidTimezoneError

logger = logging.getLogger(__name__)

GRID_COLUMNS = 3


class View(Enum):
    """The six session views."""

    LIST = "list"
    DETAIL = "detail"
    ADD_LABEL = "add_label"
    ADD_LOCATION = "add_location"
    ADD_CONFIRM = "add_confirm"
    DELETE_CONFIRM = "delete_confirm"


WIZARD_STEPS: Dict[View, int] = {
    View.ADD_LABEL: 0,
    View.ADD_LOCATION: 1,
    View.ADD_CONFIRM: 2,
}

TEXT_INPUT_VIEWS = (View.ADD_LABEL, View.ADD_LOCATION)


class ClockStore(Protocol):
    def save(self, entries: Sequence[ClockEntry]) -> bool: ...


@dataclass
class ClockDraft:
    """A clock being assembled by the add wizard."""

    label: str = ""
    timezone_id: str = ""


@dataclass
class SessionState:
    """Everything a frame needs besides the clock list."""

    active_view: View = View.LIST
    cursor_index: int = 0
    selected_index: int = 0
    draft_entry: ClockDraft = field(default_factory=ClockDraft)
    input_buffer: str = ""
    last_error: Optional[str] = None
    width: int = 80
    height: int = 24

    @property
    def wizard_step(self) -> Optional[int]:
        return WIZARD_STEPS.get(self.active_view)


class SessionController:
    """Routes events to the handler of the active view."""

    def __init__(
        self,
        entries: Sequence[ClockEntry],
        store: ClockStore,
        time_source: TimeSource,
        keymap: KeyMap = DEFAULT_KEYMAP,
        columns: int = GRID_COLUMNS,
    ) -> None:
        """Initialize the controller.

        Args:
            entries: Initial clocks, in display order
            store: Persistence used after every add/delete commit
            time_source: Used to validate zones entered in the wizard
            keymap: Key bindings
            columns: Clocks per grid row, used for vertical movement
        """
        self._entries: List[ClockEntry] = list(entries)
        self._store = store
        self._time_source = time_source
        self.keymap = keymap
        self.columns = columns
        self.state = SessionState()
        self.running = True

        self._key_handlers: Dict[View, Callable[[str], None]] = {
            View.LIST: self._on_list_key,
            View.DETAIL: self._on_detail_key,
            View.ADD_LABEL: self._on_add_label_key,
            View.ADD_LOCATION: self._on_add_location_key,
            View.ADD_CONFIRM: self._on_add_confirm_key,
            View.DELETE_CONFIRM: self._on_delete_confirm_key,
        }

    @property
    def entries(self) -> Tuple[ClockEntry, ...]:
        return tuple(self._entries)

    def handle(self, event: Event) -> bool:
        """Process one event to completion.

        Args:
            event: Key press, resize or tick

        Returns:
            False once the session has been asked to quit
        """
        if not self.running:
            return False

        if isinstance(event, KeyPress):
            self._on_key(event.key)
        elif isinstance(event, Resize):
            self.state.width = event.width
            self.state.height = event.height
        elif not isinstance(event, Tick):
            raise TypeError(f"Unsupported event: {event!r}")

        return self.running

    def quit(self) -> None:
        logger.info("Session quit requested")
        self.running = False

    def _on_key(self, key: str) -> None:
        if self.keymap.force_quit.matches(key):
            self.quit()
            return
        if self.state.active_view not in TEXT_INPUT_VIEWS and self.keymap.quit.matches(key):
            self.quit()
            return
        self._key_handlers[self.state.active_view](key)

    def _set_view(self, view: View) -> None:
        logger.debug(f"View {self.state.active_view.value} -> {view.value}")
        self.state.active_view = view

    # --- List ---

    def _on_list_key(self, key: str) -> None:
        km = self.keymap
        count = len(self._entries)
        state = self.state

        if km.up.matches(key):
            if state.cursor_index >= self.columns:
                state.cursor_index -= self.columns
        elif km.down.matches(key):
            if state.cursor_index + self.columns < count:
                state.cursor_index += self.columns
        elif km.left.matches(key):
            if state.cursor_index > 0:
                state.cursor_index -= 1
        elif km.right.matches(key):
            if state.cursor_index < count - 1:
                state.cursor_index += 1
        elif km.enter.matches(key):
            if count:
                state.selected_index = state.cursor_index
                self._set_view(View.DETAIL)
        elif km.add.matches(key):
            self._reset_wizard()
            self._set_view(View.ADD_LABEL)
        elif km.delete.matches(key):
            if count:
                self._set_view(View.DELETE_CONFIRM)

    # --- Detail ---

    def _on_detail_key(self, key: str) -> None:
        if self.keymap.back.matches(key):
            self._set_view(View.LIST)

    # --- Add wizard ---

    def _on_add_label_key(self, key: str) -> None:
        state = self.state
        if self._is_wizard_back(key):
            self._reset_wizard()
            self._set_view(View.LIST)
        elif self.keymap.submit.matches(key):
            label = state.input_buffer.strip()
            if label:
                state.draft_entry.label = label
                state.input_buffer = ""
                self._set_view(View.ADD_LOCATION)
        else:
            self._edit_buffer(key)

    def _on_add_location_key(self, key: str) -> None:
        state = self.state
        if self._is_wizard_back(key):
            state.last_error = None
            state.input_buffer = state.draft_entry.label
            self._set_view(View.ADD_LABEL)
        elif self.keymap.submit.matches(key):
            zone = state.input_buffer.strip()
            if zone:
                self._submit_zone(zone)
        elif self.keymap.complete.matches(key):
            matches = zones.suggest(state.input_buffer, limit=1)
            if matches:
                state.input_buffer = matches[0]
                state.last_error = None
        elif self._edit_buffer(key):
            state.last_error = None

    def _submit_zone(self, zone: str) -> None:
        state = self.state
        if zone not in SENTINEL_ZONES:
            try:
                zone = self._time_source.canonical_name(zone)
            except InvalidTimezoneError as e:
                logger.info(f"Rejected timezone {zone!r}")
                state.last_error = str(e)
                return

        state.draft_entry.timezone_id = zone
        state.last_error = None
        self._set_view(View.ADD_CONFIRM)

    def _on_add_confirm_key(self, key: str) -> None:
        if self.keymap.confirm.matches(key):
            draft = self.state.draft_entry
            entry = ClockEntry(label=draft.label, timezone_id=draft.timezone_id)
            self._entries.append(entry)
            self._persist()
            logger.info(f"Added clock {entry.label!r} ({entry.timezone_id})")
            self._reset_wizard()
            self._set_view(View.LIST)
        elif self.keymap.decline.matches(key):
            self._reset_wizard()
            self._set_view(View.LIST)

    def _is_wizard_back(self, key: str) -> bool:
        if self.keymap.cancel.matches(key):
            return True
        return key == BACKSPACE and not self.state.input_buffer

    def _edit_buffer(self, key: str) -> bool:
        state = self.state
        if key == BACKSPACE:
            state.input_buffer = state.input_buffer[:-1]
            return True
        if len(key) == 1 and key.isprintable():
            state.input_buffer += key
            return True
        return False

    def _reset_wizard(self) -> None:
        self.state.draft_entry = ClockDraft()
        self.state.input_buffer = ""
        self.state.last_error = None

    # --- Delete ---

    def _on_delete_confirm_key(self, key: str) -> None:
        if self.keymap.confirm.matches(key):
            state = self.state
            removed = self._entries.pop(state.cursor_index)
            self._persist()
            logger.info(f"Deleted clock {removed.label!r} ({removed.timezone_id})")
            state.cursor_index = max(0, min(state.cursor_index, len(self._entries) - 1))
            state.selected_index = state.cursor_index
            self._set_view(View.LIST)
        elif self.keymap.decline.matches(key):
            self._set_view(View.LIST)

    def _persist(self) -> None:
        self._store.save(list(self._entries))
