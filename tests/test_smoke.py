"""Headless TUI smoke tests for the quit/detach flow."""

from pathlib import Path

from textual.geometry import Size

from pxt.app import ProxyApp
from pxt.config import Settings, load_config, save_config
from pxt.events import AppEvent
from pxt.modals.quit import QuitModal
from pxt.models import ExitReason
from pxt.widgets.modal_layer import ModalLayer


def _layer(app: ProxyApp) -> ModalLayer:
    return app.query_one("#modal-layer", ModalLayer)


class TestMount:
    async def test_no_modal_on_mount(self):
        """
        Given the app is launched
        When the UI mounts
        Then no modal is active and the overlay is hidden
        """
        app = ProxyApp(Settings(session="api"))
        async with app.run_test(headless=True) as pilot:
            await pilot.pause()
            assert app.active_modal is None
            assert _layer(app).display is False
            assert "api" in app.sub_title


class TestOpen:
    async def test_q_opens_quit_modal(self):
        """
        Given no modal is active
        When the user presses q
        Then the quit modal becomes active and the overlay is 36x5
        """
        app = ProxyApp()
        async with app.run_test(headless=True) as pilot:
            await pilot.press("q")
            await pilot.pause()
            assert isinstance(app.active_modal, QuitModal)
            layer = _layer(app)
            assert layer.display is True
            assert layer.region.size == Size(36, 5)

    async def test_only_one_modal_at_a_time(self):
        """
        Given the quit modal is active
        When another modal is opened
        Then the request is refused and the first modal stays
        """
        app = ProxyApp()
        async with app.run_test(headless=True) as pilot:
            await pilot.press("q")
            first = app.active_modal
            assert app.open_modal(QuitModal(app.app_sender)) is False
            assert app.active_modal is first

    async def test_stray_close_is_harmless(self):
        """
        Given no modal is active
        When a CLOSE_CURRENT_MODAL event arrives on the channel
        Then nothing changes and the app keeps running
        """
        app = ProxyApp()
        async with app.run_test(headless=True) as pilot:
            app.app_sender.send(AppEvent.CLOSE_CURRENT_MODAL)
            await pilot.pause()
            assert app.active_modal is None


class TestCancel:
    async def test_escape_closes_modal(self):
        """
        Given the quit modal is active
        When the user presses Escape
        Then the modal is closed and the app keeps running
        """
        app = ProxyApp()
        async with app.run_test(headless=True) as pilot:
            await pilot.press("q")
            await pilot.press("escape")
            await pilot.pause()
            assert app.active_modal is None
            assert _layer(app).display is False
            assert app.return_value is None

    async def test_n_closes_modal(self):
        """
        Given the quit modal is active
        When the user presses n
        Then the modal is closed
        """
        app = ProxyApp()
        async with app.run_test(headless=True) as pilot:
            await pilot.press("q")
            await pilot.press("n")
            await pilot.pause()
            assert app.active_modal is None

    async def test_modal_can_be_reopened(self):
        """
        Given the quit modal was opened and cancelled
        When the user presses q again
        Then a fresh quit modal becomes active
        """
        app = ProxyApp()
        async with app.run_test(headless=True) as pilot:
            await pilot.press("q", "escape")
            await pilot.pause()
            await pilot.press("q")
            await pilot.pause()
            assert isinstance(app.active_modal, QuitModal)


class TestBlocking:
    async def test_modified_keys_are_swallowed(self):
        """
        Given the quit modal is active
        When ctrl+y and other unbound keys are pressed
        Then the modal stays open and the app does not exit
        """
        app = ProxyApp()
        async with app.run_test(headless=True) as pilot:
            await pilot.press("q")
            modal = app.active_modal
            await pilot.press("ctrl+y", "x", "q")
            await pilot.pause()
            assert app.active_modal is modal
            assert app.return_value is None

    async def test_resize_reaches_layout(self):
        """
        Given the quit modal is active
        When the terminal is resized
        Then the modal stays open and the overlay keeps its size
        """
        app = ProxyApp()
        async with app.run_test(headless=True, size=(100, 40)) as pilot:
            await pilot.press("q")
            await pilot.resize_terminal(80, 30)
            await pilot.pause()
            assert isinstance(app.active_modal, QuitModal)
            assert app.screen.size == Size(80, 30)
            assert _layer(app).region.size == Size(36, 5)


class TestExit:
    async def test_y_quits(self):
        """
        Given the quit modal is active
        When the user presses y
        Then the app exits with ExitReason.QUIT
        """
        app = ProxyApp()
        async with app.run_test(headless=True) as pilot:
            await pilot.press("q")
            await pilot.press("y")
        assert app.return_value is ExitReason.QUIT
        assert app.state.detached is False

    async def test_d_detaches(self):
        """
        Given the quit modal is active
        When the user presses d
        Then the app exits with ExitReason.DETACH and the state is marked detached
        """
        app = ProxyApp()
        async with app.run_test(headless=True) as pilot:
            await pilot.press("q")
            await pilot.press("d")
        assert app.return_value is ExitReason.DETACH
        assert app.state.detached is True

    async def test_y_without_modal_does_nothing(self):
        """
        Given no modal is active
        When the user presses y and d
        Then the app does not exit
        """
        app = ProxyApp()
        async with app.run_test(headless=True) as pilot:
            await pilot.press("y", "d")
            await pilot.pause()
            assert app.return_value is None


class TestTheme:
    async def test_configured_theme_applied_on_mount(self):
        """
        Given settings that name a theme
        When the app mounts
        Then that theme is active
        """
        app = ProxyApp(Settings(theme="nord"))
        async with app.run_test(headless=True) as pilot:
            await pilot.pause()
            assert app.theme == "nord"

    async def test_theme_change_written_to_config(self, tmp_path: Path):
        """
        Given an app started with theme persistence and a config file
        When the theme is changed
        Then the new theme is saved in that config file and other settings are kept
        """
        cfg_path = tmp_path / "config.json"
        save_config(Settings(session="from-file"), cfg_path)
        app = ProxyApp(load_config(cfg_path), persist_theme=True, config_path=cfg_path)
        async with app.run_test(headless=True) as pilot:
            app.theme = "nord"
            await pilot.pause()

        stored = load_config(cfg_path)
        assert stored.theme == "nord"
        assert stored.session == "from-file"

    async def test_theme_not_written_without_persistence(self, tmp_path: Path):
        """
        Given an app started without theme persistence
        When the theme is changed
        Then the config file is left untouched
        """
        cfg_path = tmp_path / "config.json"
        save_config(Settings(), cfg_path)
        before = cfg_path.read_text()
        app = ProxyApp(config_path=cfg_path)
        async with app.run_test(headless=True) as pilot:
            app.theme = "nord"
            await pilot.pause()

        assert cfg_path.read_text() == before
