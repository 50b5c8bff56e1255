"""Task list with add, toggle and delete by index."""

from dataclasses import dataclass, field, replace
from typing import Any

from pennywise.domain.models import AddResult, Rejection


@dataclass(frozen=True)
class Task:
    """Immutable task. Toggling replaces it with a flipped copy."""

    text: str
    completed: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {"text": self.text, "completed": self.completed}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Task":
        """Build a task from its stored form.

        Raises:
            KeyError: If the text is missing.
            ValueError: If the completed flag is not a boolean.
        """
        completed = data.get("completed", False)
        if not isinstance(completed, bool):
            raise ValueError(f"Invalid completed flag: {completed!r}")
        return cls(text=str(data["text"]), completed=completed)


@dataclass
class TaskList:
    """Ordered collection of tasks addressed by 0-based index."""

    tasks: list[Task] = field(default_factory=list)

    def add(self, text: str) -> AddResult[Task]:
        """Append an incomplete task.

        Args:
            text: Task label.

        Returns:
            AddResult with the new task, or EMPTY_TEXT for blank text.
        """
        if not text.strip():
            return AddResult(rejection=Rejection.EMPTY_TEXT)

        task = Task(text=text, completed=False)
        self.tasks.append(task)
        return AddResult(entity=task)

    def toggle(self, index: int) -> bool:
        """Flip the completed flag of a task.

        Args:
            index: 0-based task index.

        Returns:
            True if a task was toggled, False if the index is out of range.
        """
        if not 0 <= index < len(self.tasks):
            return False

        task = self.tasks[index]
        self.tasks[index] = replace(task, completed=not task.completed)
        return True

    def delete(self, index: int) -> bool:
        """Remove a task, keeping the order of the others.

        Args:
            index: 0-based task index.

        Returns:
            True if a task was removed, False if the index is out of range.
        """
        if not 0 <= index < len(self.tasks):
            return False

        del self.tasks[index]
        return True

    def __len__(self) -> int:
        return len(self.tasks)
