def is_owner(*, actor_id: int | None, owner_id: int) -> bool:
    """Return True when an authenticated actor is the resource's ``user_id``."""
    if actor_id is None:
        return False
    return int(actor_id) == int(owner_id)
