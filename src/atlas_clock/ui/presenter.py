"""Per-view rendering of the session.

Each view has one render method; ``Presenter.render`` picks it from the
active view and wraps the result in the title banner and key-hint footer.
"""

from typing import Callable, Dict, List, Sequence

from rich.align import Align
from rich.console import Group, RenderableType
from rich.table import Table
from rich.text import Text

from atlas_clock.core import zones
from atlas_clock.core.keys import DEFAULT_KEYMAP, KeyBinding, KeyMap
from atlas_clock.core.models import ClockEntry
from atlas_clock.core.session import GRID_COLUMNS, SessionState, View
from atlas_clock.core.time_source import TimeSource
from atlas_clock.terminal.themes import ClockTheme
from atlas_clock.ui.components import (
    ClockCard,
    KeyHintBar,
    confirm_dialog,
    error_line,
    input_line,
)
from atlas_clock.ui.glyphs import render_big_text
from atlas_clock.utils.time_utils import (
    format_clock_time,
    format_long_date,
    format_zone_caption,
)

TITLE = "ATLAS CLOCK"
EMPTY_LIST_MESSAGE = "No clocks. Press 'a' to add."
LABEL_PLACEHOLDER = "Label (e.g. New York)"
LOCATION_PLACEHOLDER = "Timezone (e.g. America/New_York, UTC, Local)"
MAX_SUGGESTIONS = 5

Renderer = Callable[[SessionState, Sequence[ClockEntry]], RenderableType]


class Presenter:
    """Turns session state into a rich renderable."""

    def __init__(
        self,
        theme: ClockTheme,
        time_source: TimeSource,
        keymap: KeyMap = DEFAULT_KEYMAP,
        columns: int = GRID_COLUMNS,
    ) -> None:
        """Initialize the presenter.

        Args:
            theme: Theme fixed for the whole session
            time_source: Supplies the current time per clock
            keymap: Bindings shown in the footer
            columns: Clocks per grid row
        """
        self.theme = theme
        self.time_source = time_source
        self.keymap = keymap
        self.columns = columns
        self.clock_card = ClockCard(theme)
        self.hint_bar = KeyHintBar(theme)

        self._renderers: Dict[View, Renderer] = {
            View.LIST: self.render_list,
            View.DETAIL: self.render_detail,
            View.ADD_LABEL: self.render_add_label,
            View.ADD_LOCATION: self.render_add_location,
            View.ADD_CONFIRM: self.render_add_confirm,
            View.DELETE_CONFIRM: self.render_delete_confirm,
        }

    def render(self, state: SessionState, entries: Sequence[ClockEntry]) -> RenderableType:
        """Render a full frame for the active view.

        Args:
            state: Current session state
            entries: Current clocks

        Returns:
            Frame centered in the terminal size recorded in the state
        """
        body = self._renderers[state.active_view](state, entries)
        frame = Group(
            Align.center(Text(TITLE, style=self.theme.title)),
            Text(""),
            Align.center(body),
            Text(""),
            Align.center(self.hint_bar.render(self.hints_for(state.active_view))),
        )
        return Align.center(frame, vertical="middle", height=max(state.height, 1))

    def hints_for(self, view: View) -> List[KeyBinding]:
        """Get the bindings listed in the footer of a view."""
        km = self.keymap
        if view is View.LIST:
            return [km.up, km.down, km.left, km.right, km.enter, km.add, km.delete, km.quit]
        if view is View.DETAIL:
            return [km.back, km.quit]
        if view is View.ADD_LABEL:
            return [km.submit, km.cancel, km.force_quit]
        if view is View.ADD_LOCATION:
            return [km.submit, km.complete, km.cancel, km.force_quit]
        return [km.confirm, km.decline]

    def render_list(self, state: SessionState, entries: Sequence[ClockEntry]) -> RenderableType:
        if not entries:
            return Text(EMPTY_LIST_MESSAGE, style=self.theme.muted)

        grid = Table.grid(padding=(0, 1))
        for _ in range(min(self.columns, len(entries))):
            grid.add_column()

        for start in range(0, len(entries), self.columns):
            row = [
                self.clock_card.render(
                    entry,
                    self.time_source.now_in(entry.timezone_id),
                    selected=index == state.cursor_index,
                )
                for index, entry in enumerate(entries[start : start + self.columns], start)
            ]
            grid.add_row(*row)

        return grid

    def render_detail(self, state: SessionState, entries: Sequence[ClockEntry]) -> RenderableType:
        if not 0 <= state.selected_index < len(entries):
            return error_line(self.theme, "Clock not found")

        entry = entries[state.selected_index]
        now = self.time_source.now_in(entry.timezone_id)
        big_time = render_big_text(format_clock_time(now, with_fraction=True))

        return Group(
            Align.center(Text(entry.label.upper(), style=self.theme.label)),
            Text(""),
            Align.center(Text(big_time, style=self.theme.accent)),
            Text(""),
            Align.center(Text(format_long_date(now), style=self.theme.muted)),
            Align.center(Text(format_zone_caption(now), style=self.theme.muted)),
            Align.center(Text(entry.timezone_id, style=self.theme.hint_desc)),
        )

    def render_add_label(self, state: SessionState, entries: Sequence[ClockEntry]) -> RenderableType:
        return Group(
            Text("STEP 1 OF 3 · ENTER LABEL", style=self.theme.label),
            Text(""),
            input_line(self.theme, state.input_buffer, LABEL_PLACEHOLDER),
        )

    def render_add_location(
        self, state: SessionState, entries: Sequence[ClockEntry]
    ) -> RenderableType:
        parts: List[RenderableType] = [
            Text("STEP 2 OF 3 · ENTER TIMEZONE", style=self.theme.label),
            Text.assemble(("Label: ", self.theme.muted), (state.draft_entry.label, self.theme.time)),
            Text(""),
            input_line(self.theme, state.input_buffer, LOCATION_PLACEHOLDER),
        ]

        suggestions = zones.suggest(state.input_buffer, limit=MAX_SUGGESTIONS)
        if suggestions:
            parts.append(Text(""))
            parts.extend(Text(f"  {zone}", style=self.theme.muted) for zone in suggestions)

        if state.last_error:
            parts.append(Text(""))
            parts.append(error_line(self.theme, state.last_error))

        return Group(*parts)

    def render_add_confirm(self, state: SessionState, entries: Sequence[ClockEntry]) -> RenderableType:
        draft = state.draft_entry
        return confirm_dialog(
            self.theme,
            "CONFIRM ADDING CLOCK?",
            [("Label: ", draft.label), ("Location: ", draft.timezone_id)],
        )

    def render_delete_confirm(
        self, state: SessionState, entries: Sequence[ClockEntry]
    ) -> RenderableType:
        if not 0 <= state.cursor_index < len(entries):
            return error_line(self.theme, "Clock not found")

        entry = entries[state.cursor_index]
        return confirm_dialog(
            self.theme,
            "ARE YOU SURE YOU WANT TO DELETE?",
            [("", f"{entry.label} ({entry.timezone_id})")],
        )
