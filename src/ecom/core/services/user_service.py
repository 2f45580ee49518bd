from loguru import logger
from sqlmodel import Session

from src.ecom.core.models.result import ServiceResult
from src.ecom.entities.user import UserMapper, UserRepository, UserRequest, UserResponse


class UserService:
    def __init__(self, db_session: Session):
        self._db_session = db_session
        self._user_repo = UserRepository(db_session)

    def create(self, request: UserRequest) -> UserResponse:
        """Create a user from ``request``. No duplicate email check is made."""
        user = UserMapper.to_entity(request)
        saved = self._user_repo.save(user)
        self._db_session.commit()
        logger.info("Created user {} with role {}", saved.id, saved.role.value)
        return UserMapper.to_response(saved)

    def update(self, user_id: str, request: UserRequest) -> ServiceResult[UserResponse]:
        """Apply a partial update.

        Only fields present in ``request`` are overwritten. A request without
        an address keeps the stored address; a request with one replaces it.
        """
        user = self._user_repo.get(user_id)
        if user is None:
            logger.debug("User {} not found for update", user_id)
            return ServiceResult.not_found(f"User not found with id: {user_id}")

        UserMapper.apply_update(request, user)
        saved = self._user_repo.save(user)
        self._db_session.commit()
        logger.info("Updated user {}", saved.id)
        return ServiceResult.success(UserMapper.to_response(saved))

    def get_by_id(self, user_id: str) -> ServiceResult[UserResponse]:
        user = self._user_repo.get(user_id)
        if user is None:
            return ServiceResult.not_found(f"User not found with id: {user_id}")
        return ServiceResult.success(UserMapper.to_response(user))

    def list_all(self) -> list[UserResponse]:
        return [UserMapper.to_response(u) for u in self._user_repo.list_all()]

    def list_active(self) -> list[UserResponse]:
        return [UserMapper.to_response(u) for u in self._user_repo.list_active()]

    def soft_delete(self, user_id: str) -> ServiceResult[None]:
        user = self._user_repo.get(user_id)
        if user is None:
            return ServiceResult.not_found(f"User not found with id: {user_id}")

        user.active = False
        self._user_repo.save(user)
        self._db_session.commit()
        logger.info("Deactivated user {}", user_id)
        return ServiceResult.success()

    def search(self, keyword: str | None) -> list[UserResponse]:
        return [UserMapper.to_response(u) for u in self._user_repo.search(keyword)]
