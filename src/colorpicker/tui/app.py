"""Main TUI application for the color picker."""

import logging

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Footer, Header, Label, TabbedContent, TabPane

from colorpicker.core import ColorPickerController, Picked, Unavailable
from colorpicker.core.eyedropper import EyeDropperResult
from colorpicker.models import Color
from colorpicker.protocols import ColorEvent, ColorSource, HistoryEvent, PickerEvent
from colorpicker.ui_shared import format_all

from .decorators import handle_action_errors
from .widgets import (
    ChannelSlider,
    ColorPreview,
    CopyRequested,
    HistoryPalette,
    HistorySwatch,
    InputPanel,
    SliderPanel,
    SpectrumView,
    StatusBar,
    ValuePanel,
)

logger = logging.getLogger(__name__)


class ColorPickerApp(App):
    """
    Textual TUI for the color picker.

    This is a PURE UI layer: the ColorPickerController owns the current
    color, the history and the eye-dropper flag. Widgets post messages, the
    app turns them into controller operations, and the controller's events
    flow back through the observer methods below to refresh every widget.

    Implements ColorObserver, HistoryObserver and PickerObserver via
    structural subtyping (no explicit inheritance to avoid metaclass
    conflicts between App and Protocol).
    """

    TITLE = "Color Picker"

    CSS = """
    #main {
        height: 1fr;
    }

    #sidebar {
        width: 46;
        padding: 0 1;
    }

    #actions {
        height: 3;
        margin-top: 1;
    }

    #actions Button {
        width: 1fr;
        min-width: 8;
    }

    #history-label {
        margin-top: 1;
        text-style: bold;
    }

    #modes {
        width: 1fr;
    }
    """

    BINDINGS = [
        Binding("r", "random_color", "Random", show=True),
        Binding("e", "eyedropper", "Eye-dropper", show=True),
        Binding("a", "add_to_history", "Save to History", show=True),
        Binding("c", "copy('HEX')", "Copy Hex", show=True),
        Binding("ctrl+q", "quit", "Quit", show=True),
    ]

    # =================================================================
    # Initialization & Lifecycle
    # =================================================================

    def __init__(self, controller: ColorPickerController):
        """
        Initialize the Textual UI application.

        Args:
            controller: The controller owning all picker state
        """
        super().__init__()
        self.controller = controller
        logger.info("ColorPickerApp TUI created")

    def compose(self) -> ComposeResult:
        """Create the app layout."""
        yield Header()
        with Horizontal(id="main"):
            with Vertical(id="sidebar"):
                yield ColorPreview(id="preview")
                yield ValuePanel()
                with Horizontal(id="actions"):
                    yield Button("Pick", id="eyedropper-btn", variant="primary")
                    yield Button("Random", id="random-btn")
                    yield Button("Save", id="save-btn")
                yield Label("History", id="history-label")
                yield HistoryPalette(limit=self.controller.config.history_limit)
            with TabbedContent(id="modes"):
                with TabPane("Spectrum", id="tab-spectrum"):
                    yield SpectrumView(self.controller.spectrum)
                with TabPane("Sliders", id="tab-sliders"):
                    yield SliderPanel()
                with TabPane("Input", id="tab-input"):
                    yield InputPanel()
        yield StatusBar()
        yield Footer()

    def on_mount(self) -> None:
        """Register with the controller and draw the initial state."""
        self.controller.register_observer(self)
        self._show_color(self.controller.color)
        self._show_history(self.controller.history)
        logger.info("TUI registered with controller")

    def on_unmount(self) -> None:
        self.controller.unregister_observer(self)

    # =================================================================
    # Observer Protocol Implementation
    # =================================================================

    def on_color_event(self, event: ColorEvent, color: Color, source: ColorSource) -> None:
        """Refresh every color widget from the new snapshot."""
        self._show_color(color)
        if source != ColorSource.SPECTRUM:
            self.query_one(SpectrumView).clear_marker()
        self.query_one(StatusBar).update_state(source=source.value)

    def on_history_event(self, event: HistoryEvent, history: tuple[str, ...]) -> None:
        self._show_history(history)

    def on_picker_event(self, event: PickerEvent, result: EyeDropperResult | None = None) -> None:
        picking = event == PickerEvent.PICKING_STARTED
        self.query_one("#eyedropper-btn", Button).disabled = picking
        self.query_one(StatusBar).update_state(picking=picking)

    def _show_color(self, color: Color) -> None:
        self.query_one(ColorPreview).show_color(color)
        self.query_one(ValuePanel).show_color(color)
        self.query_one(SliderPanel).show_color(color)
        self.query_one(InputPanel).show_color(color)

    def _show_history(self, history: tuple[str, ...]) -> None:
        self.query_one(HistoryPalette).show_history(history)
        self.query_one(StatusBar).update_state(history_count=len(history))

    # =================================================================
    # Widget Messages
    # =================================================================

    def on_spectrum_view_picked(self, event: SpectrumView.Picked) -> None:
        self.controller.sample_spectrum_fraction(event.fx, event.fy)
        self.query_one(SpectrumView).set_marker(event.fx, event.fy)

    def on_channel_slider_changed(self, event: ChannelSlider.Changed) -> None:
        if (event.slider.id or "").startswith("hsl-"):
            self.controller.set_hsl_channel(event.channel, event.value)
        else:
            self.controller.set_channel(event.channel, event.value)

    def on_input_panel_hex_entered(self, event: InputPanel.HexEntered) -> None:
        # Fields mirroring the current color are not new entries
        if event.value.lower() != self.controller.color.hex:
            self.controller.set_hex(event.value)

    def on_input_panel_channel_entered(self, event: InputPanel.ChannelEntered) -> None:
        if getattr(self.controller.color.rgb, event.channel) != event.value:
            self.controller.set_channel(event.channel, event.value)

    @handle_action_errors("select history color")
    def on_history_swatch_selected(self, event: HistorySwatch.Selected) -> None:
        self.controller.select_history(event.index)

    def on_copy_requested(self, event: CopyRequested) -> None:
        self._copy(event.label, event.text)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle the sidebar action buttons."""
        button_id = event.button.id
        if button_id == "eyedropper-btn":
            self.action_eyedropper()
        elif button_id == "random-btn":
            self.action_random_color()
        elif button_id == "save-btn":
            self.action_add_to_history()

    # =================================================================
    # Actions
    # =================================================================

    def action_random_color(self) -> None:
        self.controller.random_color()

    def action_add_to_history(self) -> None:
        self.controller.add_current_to_history()
        self.notify(f"Saved {self.controller.color.hex} to history", timeout=2)

    @handle_action_errors("copy value")
    def action_copy(self, label: str) -> None:
        """Copy one representation of the current color."""
        self._copy(label, format_all(self.controller.color)[label])

    def action_eyedropper(self) -> None:
        """Start the screen eye-dropper in a background worker."""
        if self.controller.is_picking:
            return
        self.run_worker(self._pick_from_screen(), exclusive=True, group="eyedropper")

    async def _pick_from_screen(self) -> None:
        delay = self.controller.config.eyedropper_delay
        self.notify(f"Move the pointer over a color, sampling in {delay:g}s", title="Eye-dropper", timeout=max(delay, 2))
        result = await self.controller.pick_from_screen()
        if isinstance(result, Picked):
            self.notify(f"Picked {result.hex}", timeout=2)
        elif isinstance(result, Unavailable):
            self.notify(result.reason, title="Eye-dropper not supported", severity="error", timeout=5)

    def _copy(self, label: str, text: str) -> None:
        self.copy_to_clipboard(text)
        self.notify(f"{label} copied to clipboard: {text}", title="Copied", timeout=2)
        logger.debug(f"Copied {label} value {text}")
