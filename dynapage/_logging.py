import hashlib
import logging
from typing import Any

# Create the library logger
logger = logging.getLogger("dynapage")

# Add NullHandler to prevent "No handlers could be found" warnings
# if the application doesn't configure logging.
logger.addHandler(logging.NullHandler())


def redact_key(key: Any) -> str | None:
    """
    Redacts a DynamoDB key (e.g. a LastEvaluatedKey) for logging.
    Values are hashed so pages can be correlated without revealing PII.
    """
    if key is None:
        return None
    try:
        if isinstance(key, dict):
            # Sort attribute names so the same key always renders the same way
            redacted = {
                k: hashlib.sha256(str(key[k]).encode("utf-8")).hexdigest()[:8]
                for k in sorted(key)
            }
            return str(redacted)
        return hashlib.sha256(str(key).encode("utf-8")).hexdigest()[:8]
    except Exception:
        return "<redaction_failed>"
