"""
Terminal App
============
Full-screen prompt_toolkit application driving the setup and wizard screens.

Event loop:
    - Key bindings normalise prompt_toolkit key names and feed KeyPress
      events into transitions.update().
    - A returned command is started as the ONLY background task; its
      completion event is fed back through the same dispatch() path.
    - Every dispatch invalidates the app so render() runs again.

At most one background task exists at a time. The state machine already
refuses overlapping work through its fetching/submitting/loading flags;
the guard here only catches programming errors and logs them.

Quitting (ctrl+c / esc) exits the application, which cancels an
in-flight task.
"""
import asyncio
import logging
from typing import Optional

from prompt_toolkit import Application
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout import Layout, Window
from prompt_toolkit.layout.controls import FormattedTextControl

from daily.agents.command_runner import CommandRunner, failure_event
from daily.agents.transitions import ScreenState, update
from daily.models.events import Command, Event, KeyPress, Quit
from daily.ui.render import render
from daily.ui.theme import DEFAULT_THEME, Theme

logger = logging.getLogger(__name__)

# prompt_toolkit key → wizard key name
KEY_NAMES = {
    "enter": "enter",
    "tab": "tab",
    "s-tab": "shift+tab",
    "up": "up",
    "down": "down",
    "c-c": "ctrl+c",
    "escape": "esc",
    "backspace": "backspace",
    "c-u": "ctrl+u",
}


class DailyApp:
    """
    Owns the screen state and the prompt_toolkit Application.

    Parameters
    ----------
    state : SetupState | WizardState
        Initial screen.
    runner : CommandRunner
        Executes commands returned by the transitions.
    theme : Theme
        Styles handed to the render functions.
    submit_label : str
        Text of the wizard's final button.
    application : Application, optional
        Pre-built application (tests); built from the bindings otherwise.
    """

    def __init__(
        self,
        state: ScreenState,
        runner: CommandRunner,
        theme: Theme = DEFAULT_THEME,
        submit_label: str = "Open Pre-filled Form",
        application: Optional[Application] = None,
    ) -> None:
        self.state = state
        self.runner = runner
        self.theme = theme
        self.submit_label = submit_label
        self._in_flight: Optional[asyncio.Future] = None
        self.application = application or self._build_application()

    # ------------------------------------------------------------------
    # prompt_toolkit wiring
    # ------------------------------------------------------------------
    def _build_application(self) -> Application:
        kb = KeyBindings()

        for pt_key, name in KEY_NAMES.items():
            kb.add(pt_key, eager=True)(self._key_handler(name))

        @kb.add(Keys.Any)
        def _insert(event):
            if event.data and event.data.isprintable():
                self.dispatch(KeyPress("rune", event.data))

        @kb.add(Keys.BracketedPaste)
        def _paste(event):
            self.dispatch(KeyPress("rune", event.data))

        control = FormattedTextControl(self._fragments, focusable=True, show_cursor=False)
        return Application(
            layout=Layout(Window(content=control, wrap_lines=True)),
            key_bindings=kb,
            full_screen=True,
        )

    def _key_handler(self, name: str):
        def handler(event):
            self.dispatch(KeyPress(name))
        return handler

    def _fragments(self):
        return render(self.state, self.theme, self.submit_label)

    # ------------------------------------------------------------------
    # Event dispatch
    # ------------------------------------------------------------------
    def dispatch(self, event: Event) -> None:
        self.state, command = update(self.state, event)
        if isinstance(command, Quit):
            logger.info("Quit requested")
            self.application.exit()
            return
        if command is not None:
            self._start(command)
        self.application.invalidate()

    @property
    def busy(self) -> bool:
        return self._in_flight is not None and not self._in_flight.done()

    def _start(self, command: Command) -> None:
        if self.busy:
            logger.warning("Dropping %s, another operation is in flight", type(command).__name__)
            return
        self._in_flight = self.application.create_background_task(self._complete(command))

    async def _complete(self, command: Command) -> None:
        try:
            event = await self.runner.run(command)
        except Exception as e:
            logger.exception("%s failed", type(command).__name__)
            event = failure_event(command, str(e) or type(e).__name__)
        finally:
            self._in_flight = None
        self.dispatch(event)

    def run(self) -> None:
        self.application.run()
