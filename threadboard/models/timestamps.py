from datetime import datetime, timezone


def utcnow():
    # stored naive, always UTC
    return datetime.now(timezone.utc).replace(tzinfo=None)
