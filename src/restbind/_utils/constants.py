# Headers
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_CONTENT_LENGTH = "Content-Length"

# Content types
CONTENT_TYPE_FORM_URLENCODED = "application/x-www-form-urlencoded"

# Logging
LOGGER_NAME = "restbind"
