"""Rich progress display driven by ``on_progress(event, payload)`` callbacks."""

from __future__ import annotations

from types import TracebackType

from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)


class ProgressReporter:
    """Translate conversion events into rich progress tasks.

    Known events:
    - ``convert:start`` {"pages": N}: open the pages bar
    - ``page:start`` {"page": name}: show the page being converted
    - ``page:converted`` / ``page:failed`` {"page": name}: advance the bar
    - ``convert:finalized`` {"converted": n, "failed": m}: close the bar
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(stderr=True)
        self.progress = Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            MofNCompleteColumn(),
            TimeElapsedColumn(),
            console=self.console,
            transient=False,
        )
        self._tasks: dict[str, TaskID] = {}
        self._totals: dict[str, int] = {}

    def __enter__(self) -> ProgressReporter:
        self.progress.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.progress.stop()

    def add_step(self, description: str, total: int | None = None) -> TaskID:
        return self.progress.add_task(description, total=total)

    def finish_task(self, task_id: TaskID) -> None:
        task = next((t for t in self.progress.tasks if t.id == task_id), None)
        if task is not None and task.total is not None:
            self.progress.update(task_id, completed=task.total)
        self.progress.remove_task(task_id)

    def emit(self, event: str, payload: dict[str, int | str]) -> None:
        if event == "convert:start":
            total = int(payload.get("pages", 0))
            self._totals["pages"] = total
            self._tasks["pages"] = self.add_step("Converting pages", total=total)
        elif event == "page:start":
            task = self._tasks.get("pages")
            if task is not None:
                self.progress.update(task, description=f"Converting {payload.get('page', '')}")
        elif event in ("page:converted", "page:failed"):
            task = self._tasks.get("pages")
            if task is not None:
                self.progress.advance(task)
            if event == "page:failed":
                self.console.print(f"[red]Failed:[/red] {payload.get('page', '')}")
        elif event == "convert:finalized":
            task = self._tasks.pop("pages", None)
            if task is not None:
                self.finish_task(task)


__all__ = ["ProgressReporter"]
