from ryder.errors import InvalidTransitionError, ValidationError
from ryder.models import STATUS_COMPLETED, STATUS_PREPARED, STATUS_RUNNING, STATUSES

# Forward-only moves, used when strict transitions are enabled
LEGAL_TRANSITIONS = {
    STATUS_PREPARED: {STATUS_PREPARED, STATUS_RUNNING, STATUS_COMPLETED},
    STATUS_RUNNING: {STATUS_RUNNING, STATUS_COMPLETED},
    STATUS_COMPLETED: {STATUS_COMPLETED},
}


def normalize_status(value) -> str:
    """Bucket a stored status; anything unrecognised counts as prepared."""
    if isinstance(value, str) and value in STATUSES:
        return value
    return STATUS_PREPARED


def validate_status(value) -> str:
    if not isinstance(value, str) or value.strip().lower() not in STATUSES:
        raise ValidationError(f"Unknown status {value!r}; expected one of {', '.join(STATUSES)}")
    return value.strip().lower()


def can_transition(current, requested: str, strict: bool = False) -> bool:
    if not strict:
        return True
    return requested in LEGAL_TRANSITIONS[normalize_status(current)]


def set_status(store, match_id: int, new_status, strict: bool = False) -> str:
    """Overwrite a match's status after validating the value.

    The organizer sets status explicitly; it is never derived from how many
    holes have results. Backward moves are allowed unless ``strict``.
    """
    status = validate_status(new_status)
    match = store.get_match(match_id)
    if not can_transition(match.status, status, strict):
        raise InvalidTransitionError(normalize_status(match.status), status)
    store.set_status(match_id, status)
    return status
