"""Constants used throughout the Workforce Management application."""


# Project data layout
DATA_DIR_NAME = ".workforce"
CONFIG_FILE_NAME = "workforce_config.json"
STORE_FILE_NAME = "tasks.json"

# Default task descriptions
NEW_TASK_DESCRIPTION = "New task created."
REFERENCE_TASK_DESCRIPTION = "Task created by reference assignment."

# Status messages returned to callers
PRIORITY_UPDATED_MESSAGE = "Priority updated successfully"
TASK_NOT_FOUND_MESSAGE = "Task not found"

# Logging
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]
