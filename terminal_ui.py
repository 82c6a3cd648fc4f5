"""
terminal_ui.py
Rich progress bar on stderr while package sources are queried.

The bar is transient and only shown when stderr is a terminal, so the
report on stdout is never mixed with it.
"""

from typing import Optional

from rich.console import Console
from rich.progress import BarColumn, Progress, SpinnerColumn, TextColumn, TimeElapsedColumn


class TerminalUI:
    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(stderr=True)
        self.progress = None
        self.task_id = None

    @property
    def enabled(self) -> bool:
        return self.console.is_terminal

    def start(self, total_tasks: int):
        if not self.enabled or total_tasks <= 0:
            return
        self.progress = Progress(
            SpinnerColumn(),
            TextColumn("[bold blue]{task.description}"),
            BarColumn(),
            TimeElapsedColumn(),
            console=self.console,
            transient=True,
        )
        self.progress.start()
        self.task_id = self.progress.add_task("Counting packages...", total=total_tasks, completed=0)

    def update(self, message: str):
        if self.progress is not None and self.task_id is not None:
            self.progress.update(self.task_id, advance=1, description=message)

    def stop(self):
        if self.progress is not None:
            self.progress.stop()
            self.progress = None
            self.task_id = None
