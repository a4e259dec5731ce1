"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Priority, TaskStatus) + strict date parsing
- task_errors.py: tagged result type returned by TaskManager.add_task
- task_store.py: JSON file storage (whole-file load / atomic save)
- task_manager.py: validation, duplicate check, id assignment, persistence
"""
