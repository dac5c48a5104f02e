"""Canonical logging field names.

These constants define a stable key set for structured logs and context
propagation.
"""

TIMESTAMP = "timestamp"
LEVEL = "level"
LOGGER = "logger"
MESSAGE = "message"
EXCEPTION = "exception"

# Codec fields.
OPERATION = "operation"
MESSAGE_TYPE = "message_type"
INPUT_LENGTH = "input_length"
OUTPUT_LENGTH = "output_length"
ERROR_CODE = "error_code"

# Common service-level fields.
SERVICE = "service"
ENVIRONMENT = "environment"
