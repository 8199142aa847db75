"""
Render
======
Pure functions turning screen state into prompt_toolkit formatted text.

Nothing here touches the terminal; the returned fragment lists are fed to a
FormattedTextControl by ui/app.py. The Theme is always passed in.

Wizard layout:
    title
    "Step i of N+1"
    completed fields (✓ name: value), issue title after the link
    current field prompt + input, or the submit button
    inline field error / last error / fetching notice
    key help
"""
from typing import List, Tuple

from daily.core.field_registry import CONFIRM_IDX, FIELDS, ISSUE_LINK_IDX
from daily.state.wizard_state import SetupState, WizardState
from daily.ui.theme import Theme

Fragments = List[Tuple[str, str]]

INDENT = "  "
INPUT_WIDTH = 60


def _input_view(value: str, placeholder: str, theme: Theme, width: int = INPUT_WIDTH) -> Fragments:
    """Single-line input with a block cursor at the end, scrolled to fit width."""
    if not value:
        return [(theme.cursor, placeholder[:1] or " "), (theme.blurred, placeholder[1:])]
    visible = value[-(width - 1):] if len(value) >= width else value
    return [("", visible), (theme.cursor, " ")]


def render_wizard(state: WizardState, theme: Theme, submit_label: str = "Open Pre-filled Form") -> Fragments:
    out: Fragments = []

    if state.completed:
        out.append(("", "\n" + INDENT))
        out.append((theme.success, state.done_message or "✓ Done!"))
        out.append(("", "\n\n" + INDENT + "Press enter to exit.\n\n"))
        return out

    out.append(("", "\n" + INDENT))
    out.append((theme.title, "daily report"))
    out.append(("", "\n\n" + INDENT))
    out.append((theme.blurred, f"Step {state.focus + 1} of {CONFIRM_IDX + 1}"))
    out.append(("", "\n\n"))

    if state.focus > 0:
        out.append(("", INDENT))
        out.append((theme.blurred, "Completed:"))
        out.append(("", "\n"))
        for i in range(min(state.focus, len(FIELDS))):
            out.append(("", INDENT))
            out.append((theme.blurred, f"✓ {FIELDS[i].name}: {state.values[i]}"))
            out.append(("", "\n"))
            if i == ISSUE_LINK_IDX and state.issue_title:
                out.append(("", INDENT))
                out.append((theme.blurred, f"✓ Issue Title: {state.issue_title}"))
                out.append(("", "\n"))
        out.append(("", "\n"))

    if state.focus < len(FIELDS):
        descriptor = FIELDS[state.focus]
        out.append(("", INDENT))
        out.append((theme.focused, "> " + descriptor.name))
        out.append(("", "\n" + INDENT))
        out.extend(_input_view(state.values[state.focus], descriptor.placeholder, theme))
        out.append(("", "\n"))
        if state.field_error and descriptor.validator is not None:
            out.append(("", INDENT))
            out.append((theme.error, state.field_error))
            out.append(("", "\n"))
    else:
        out.append(("", INDENT))
        label = "[ Submitting... ]" if state.submitting else f"[ {submit_label} ]"
        out.append((theme.focused, label))
        out.append(("", "\n"))

    if state.error:
        out.append(("", "\n" + INDENT))
        out.append((theme.error, "✗ " + state.error))
        out.append(("", "\n"))
    if state.fetching:
        out.append(("", "\n" + INDENT))
        out.append((theme.blurred, "⟳ Fetching issue title..."))
        out.append(("", "\n"))

    out.append(("", "\n" + INDENT))
    out.append((theme.blurred, "enter: next • tab/↑/↓: move • ctrl+c: quit"))
    out.append(("", "\n\n"))
    return out


def render_setup(state: SetupState, theme: Theme) -> Fragments:
    out: Fragments = [("", "\n" + INDENT), (theme.title, "daily - setup"), ("", "\n\n")]

    if state.loading:
        out.append(("", INDENT))
        out.append((theme.blurred, "Fetching form fields..."))
        out.append(("", "\n\n"))
        return out

    out.append(("", INDENT))
    out.append((theme.focused, "> Google Forms URL"))
    out.append(("", "\n" + INDENT))
    out.extend(_input_view(state.value, "https://docs.google.com/forms/d/e/...", theme, width=70))
    out.append(("", "\n\n"))
    if state.error:
        out.append(("", INDENT))
        out.append((theme.error, "✗ " + state.error))
        out.append(("", "\n\n"))
    out.append(("", INDENT))
    out.append((theme.blurred, "enter: continue • ctrl+c: quit"))
    out.append(("", "\n\n"))
    return out


def render(state, theme: Theme, submit_label: str = "Open Pre-filled Form") -> Fragments:
    """Render whichever screen the state belongs to."""
    if isinstance(state, SetupState):
        return render_setup(state, theme)
    return render_wizard(state, theme, submit_label)
