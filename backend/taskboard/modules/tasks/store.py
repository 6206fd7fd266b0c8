from typing import List

from taskboard.core.rwlock import RWLock

from .schema import Task


class TaskStore:
    """In-memory, ordered task storage with ascending identifiers."""

    def __init__(self) -> None:
        self._lock = RWLock()
        self._tasks: List[Task] = []
        self._next_id = 1

    def append(self, title: str, done: bool = False) -> Task:
        # id reservation and append share one critical section
        with self._lock.write_locked():
            task = Task(id=self._next_id, title=title, done=done)
            self._tasks.append(task)
            self._next_id += 1
        return task

    def list(self) -> List[Task]:
        with self._lock.read_locked():
            return list(self._tasks)

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._tasks)
