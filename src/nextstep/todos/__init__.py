"""
Todo subsystem.

Components:
- todo_models.py: data structures (TodoItem, TodoPriority, TodoCategory, RepeatCycle)
- todo_codec.py: JSON record layout of the persisted list
- organizer.py: ordering used by the organized view
- todo_store.py: in-memory list + blob persistence + derived views
- todo_api.py: creation helper and sample data
"""
