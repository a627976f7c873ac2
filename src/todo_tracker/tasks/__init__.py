"""
Task subsystem.

Components:
- task_models.py: the Task record and its strict JSON decode
- task_store.py: JSON file storage (load/save) and id assignment
- task_api.py: add / remove / list operations used by the CLI
"""
