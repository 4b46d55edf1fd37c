"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskStatus, TaskSummary) and duration helpers
- task_codec.py: JSON file load/save with atomic replace
- task_store.py: in-memory collection, id assignment, save-on-mutation
- errors.py: CorruptStoreError / InvalidInputError
"""
