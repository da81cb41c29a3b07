from __future__ import annotations


APP_NAME: str = "notifier"

# Single cache key holding the whole enabled type catalog
NOTIFICATION_TYPES_KEY: str = "notification_types"

# User-facing message for an admitted send
MSG_SENT: str = "notification sent"
