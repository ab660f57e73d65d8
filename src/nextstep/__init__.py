"""NextStep: a personal todo list with an organized view."""

from .todos.organizer import compare_todos, organize, priority_rank
from .todos.todo_api import create_todo, sample_todos
from .todos.todo_models import RepeatCycle, TodoCategory, TodoItem, TodoPriority
from .todos.todo_store import TodoStore

__all__ = [
    "RepeatCycle",
    "TodoCategory",
    "TodoItem",
    "TodoPriority",
    "TodoStore",
    "compare_todos",
    "create_todo",
    "organize",
    "priority_rank",
    "sample_todos",
]
