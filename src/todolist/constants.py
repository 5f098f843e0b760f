"""Shared constants for todolist."""

# Status assigned to every newly created task
DEFAULT_STATUS = "Not Started"

# Statuses offered by the update form. Any other string is still accepted.
KNOWN_STATUSES = ("Not Started", "In Progress", "Done")

# Error text for an unparsable or out-of-range task number
INVALID_NUMBER_MESSAGE = "Invalid task number"

# Signed 64-bit bounds for task numbers read from requests
MIN_TASK_NUMBER = -(2**63)
MAX_TASK_NUMBER = 2**63 - 1
