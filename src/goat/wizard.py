"""Interactive collection of the project and module names."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from .errors import WizardClosedError

__all__ = ["ProjectWizard", "WizardResult", "WizardState", "run_wizard"]


class WizardState(str, Enum):
    """Stages of :class:`ProjectWizard`."""

    COLLECTING_PROJECT_NAME = "collecting_project_name"
    COLLECTING_MODULE_NAME = "collecting_module_name"
    DONE = "done"
    CANCELLED = "cancelled"

    @property
    def finished(self) -> bool:
        return self in (WizardState.DONE, WizardState.CANCELLED)


@dataclass(frozen=True, slots=True)
class WizardResult:
    project_name: str
    module_name: str


PROMPTS = {
    WizardState.COLLECTING_PROJECT_NAME: "Project name",
    WizardState.COLLECTING_MODULE_NAME: "Module path",
}


class ProjectWizard:
    """Two-field form driven one event at a time.

    ``edit`` replaces the value of the field being collected, ``confirm``
    moves on to the next field once the current one is filled in and
    ``cancel`` aborts from any unfinished state.
    """

    def __init__(self) -> None:
        self.state = WizardState.COLLECTING_PROJECT_NAME
        self.project_name = ""
        self.module_name = ""

    @property
    def prompt(self) -> str:
        return PROMPTS.get(self.state, "")

    def _ensure_open(self) -> None:
        if self.state.finished:
            raise WizardClosedError(f"wizard already {self.state.value}")

    def edit(self, text: str) -> None:
        self._ensure_open()
        if self.state is WizardState.COLLECTING_PROJECT_NAME:
            self.project_name = text
        else:
            self.module_name = text

    def confirm(self) -> bool:
        """Advance past the current field; returns ``False`` if it is blank."""

        self._ensure_open()
        if self.state is WizardState.COLLECTING_PROJECT_NAME:
            if not self.project_name.strip():
                return False
            self.state = WizardState.COLLECTING_MODULE_NAME
            return True

        if not self.module_name.strip():
            return False
        self.state = WizardState.DONE
        return True

    def cancel(self) -> None:
        self._ensure_open()
        self.state = WizardState.CANCELLED

    def result(self) -> Optional[WizardResult]:
        if self.state is not WizardState.DONE:
            return None
        return WizardResult(
            project_name=self.project_name.strip(),
            module_name=self.module_name.strip(),
        )


def run_wizard(
    read_line: Callable[[str], str] = input,
    write: Callable[[str], object] = print,
) -> Optional[WizardResult]:
    """Prompt for both names; ``None`` means the user cancelled.

    End of input and ``Ctrl+C`` cancel the wizard.
    """

    wizard = ProjectWizard()
    while not wizard.state.finished:
        try:
            line = read_line(f"{wizard.prompt}: ")
        except (EOFError, KeyboardInterrupt):
            wizard.cancel()
            break
        wizard.edit(line)
        if not wizard.confirm():
            write(f"{wizard.prompt} is required.")
    return wizard.result()
