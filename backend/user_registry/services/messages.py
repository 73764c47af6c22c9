"""Response Messages — user-facing strings shared by more than one handler."""

INVALID_EMAIL = "Invalid email format. Email must contain the '@' character."
USER_ID_NOT_FOUND = "No user found with that ID."
USER_NAME_NOT_FOUND = "No user found with that name."
EMAIL_UPDATED = "Email updated successfully."
USER_DELETED = "User deleted successfully."
