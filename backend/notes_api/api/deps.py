# notes_api/api/deps.py
from notes_api.models import Note, User
from notes_api.services import UserAccountService
from notes_api.storage import TortoiseCollection

def get_user_service() -> UserAccountService:
    """
    FastAPI dependency providing the user account service.

    The service is rebuilt per request over Tortoise-backed collections; it
    holds no state of its own, so this is only a few object allocations.

    Usage:
        @router.get("/users")
        async def list_users(service: UserAccountService = Depends(get_user_service)):
            ...

    Tests can swap the storage by overriding this dependency:
        app.dependency_overrides[get_user_service] = lambda: UserAccountService(users, notes)
    """
    return UserAccountService(
        users=TortoiseCollection(User),
        notes=TortoiseCollection(Note),
    )
