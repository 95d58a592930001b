"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskStatus) and task errors
- task_store.py: in-memory store, the only mutator of the collection
- task_filter.py: search + category filter
- task_progress.py: daily completion indicator
- task_api.py: intent helpers used by the UI (form save, delete + selection)
- seed.py: initial collection (demo set or JSON file)
"""
