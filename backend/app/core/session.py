from fastapi import Request


class NotAuthenticated(Exception):
    """Raised when the request carries no logged-in user."""


def get_current_user_id(request: Request) -> int:
    # Login stores {"user_id": ..., "role": ..., "status": ...} under "user"
    user = request.session.get("user") or {}
    user_id = user.get("user_id")
    if user_id is None:
        raise NotAuthenticated()
    return int(user_id)
