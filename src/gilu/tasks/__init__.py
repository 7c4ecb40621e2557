"""
Task subsystem.

Components:
- task_models.py: Todo / Deadline / Event variants and date helpers
- task_store.py: plain-text storage (one record per line)
"""
