"""
Serialize actor state, timers, and reminders for the Dapr actor runtime.
"""
