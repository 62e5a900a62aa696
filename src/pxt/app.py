"""Main application entry point."""

import logging
from pathlib import Path

from textual import events, work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header

from pxt.channel import EventSender, channel
from pxt.config import ConfigError, Settings, load_config, save_config
from pxt.constants import APP_TITLE
from pxt.errors import log_ignored
from pxt.events import AppEvent, from_textual
from pxt.modals.base import Modal
from pxt.modals.quit import QuitModal
from pxt.models import ExitReason, LoopAction, State
from pxt.widgets.modal_layer import ModalLayer
from pxt.widgets.session_view import SessionView

log = logging.getLogger(__name__)


class ProxyApp(App[ExitReason]):
    """pxt: terminal front-end for a proxy session.

    Acts as the main loop for modals: it owns the global ``State``, the
    ``LoopAction`` and the single active-modal slot, routes input to the
    active modal first, and consumes lifecycle events from the event channel.
    """

    CSS_PATH = "app.tcss"
    TITLE = APP_TITLE

    BINDINGS = [
        Binding("q", "open_quit", "Quit"),
    ]

    def __init__(
        self,
        settings: Settings | None = None,
        persist_theme: bool = False,
        config_path: Path | None = None,
    ) -> None:
        super().__init__()
        settings = settings or Settings()
        self.state = State(
            session=settings.session,
            listen=settings.listen,
            upstream=settings.upstream,
        )
        self._saved_theme = settings.theme
        self._persist_theme = persist_theme
        self._config_path = config_path
        self._loop_action = LoopAction()
        self._app_sender, self._app_receiver = channel()
        self._modal: Modal | None = None

    @property
    def app_sender(self) -> EventSender:
        """A new producer handle for the application event channel."""
        return self._app_sender.clone()

    @property
    def active_modal(self) -> Modal | None:
        return self._modal

    def compose(self) -> ComposeResult:
        yield Header()
        yield SessionView(self.state, id="session")
        yield ModalLayer(id="modal-layer")
        yield Footer()

    def on_mount(self) -> None:
        self.sub_title = self.state.describe()
        if self._saved_theme:
            self.theme = self._saved_theme
        self._pump_app_events()

    def on_unmount(self) -> None:
        self._app_receiver.close()

    def watch_theme(self, theme: str) -> None:
        """Write theme changes back to the config file the app was started with."""
        if not self._persist_theme:
            return
        with log_ignored(ConfigError):
            stored = load_config(self._config_path)
            if stored.theme != theme:
                save_config(stored.model_copy(update={"theme": theme}), self._config_path)

    @work(exclusive=True, group="app-events")
    async def _pump_app_events(self) -> None:
        """Consume the event channel in FIFO order until it is closed."""
        async for event in self._app_receiver:
            self._handle_app_event(event)

    def _handle_app_event(self, event: AppEvent) -> None:
        log.debug("app event %s", event.name)
        if event is AppEvent.CLOSE_CURRENT_MODAL:
            self.close_modal()
        elif event is AppEvent.QUIT:
            self.exit(ExitReason.QUIT)
        elif event is AppEvent.DETACH:
            self.state.detached = True
            self.exit(ExitReason.DETACH)

    def _modal_layer(self) -> ModalLayer:
        return self.query_one("#modal-layer", ModalLayer)

    def open_modal(self, modal: Modal) -> bool:
        """Install *modal* in the active slot.

        Returns False (and leaves the current modal in place) if a modal is
        already active.
        """
        if self._modal is not None:
            log.debug("modal already active, ignoring %s", type(modal).__name__)
            return False
        self._modal = modal.boxed()
        self._modal_layer().show(self._modal)
        return True

    def close_modal(self) -> None:
        """Drop the active modal. No-op when there is none."""
        if self._modal is None:
            return
        self._modal = None
        self._modal_layer().hide()

    def action_open_quit(self) -> None:
        self.open_modal(QuitModal(self.app_sender))

    async def on_event(self, event: events.Event) -> None:
        modal = self._modal
        if modal is not None and not event.is_forwarded:
            terminal_event = from_textual(event)
            if terminal_event is not None:
                consumed = modal.handle_input(self.state, self._loop_action, terminal_event)
                if self._loop_action.take_render():
                    self.refresh()
                if consumed:
                    return
        await super().on_event(event)

    def on_resize(self, event: events.Resize) -> None:
        if self._modal is not None:
            self._modal_layer().reposition(event.size)


def main() -> None:
    ProxyApp(persist_theme=True).run()


if __name__ == "__main__":
    main()
