"""Tests for UserService."""

from unittest.mock import MagicMock

import pytest
from sqlmodel import Session

from src.ecom.core.services.user_service import UserService
from src.ecom.entities.user import (
    AddressDTO,
    UserRepository,
    UserRequest,
    UserResponse,
    UserRole,
)
from tests.fixtures.dummies import make_address_dto, make_user_request


@pytest.fixture
def service(session: Session) -> UserService:
    return UserService(session)


class TestCreate:
    def test_create_user(self, service: UserService, user_request: UserRequest):
        response = service.create(user_request)

        assert response.id is not None
        assert response.first_name == "John"
        assert response.email == "john.doe@example.com"
        assert response.role == UserRole.CUSTOMER
        assert response.active is True
        assert response.address is None

    def test_create_user_with_address(self, service: UserService, user_request_with_address: UserRequest):
        response = service.create(user_request_with_address)

        assert response.address == make_address_dto()

    def test_create_admin(self, service: UserService):
        response = service.create(make_user_request(role=UserRole.ADMIN))

        assert response.role == UserRole.ADMIN

    def test_create_none_raises(self, service: UserService):
        with pytest.raises(TypeError):
            service.create(None)


class TestUpdate:
    def test_partial_update_keeps_other_fields(self, service: UserService, user_request_with_address: UserRequest):
        created = service.create(user_request_with_address)

        result = service.update(created.id, UserRequest(phone="555-0000"))

        assert result.ok
        assert result.value.phone == "555-0000"
        assert result.value.first_name == "John"
        assert result.value.address == make_address_dto()

    def test_update_replaces_address(self, service: UserService, user_request_with_address: UserRequest):
        created = service.create(user_request_with_address)

        result = service.update(created.id, UserRequest(address=AddressDTO(city="Boston")))

        assert result.value.address == AddressDTO(city="Boston")
        assert service.get_by_id(created.id).value.address == AddressDTO(city="Boston")

    def test_update_adds_address(self, service: UserService, saved_user: UserResponse):
        result = service.update(saved_user.id, UserRequest(address=make_address_dto()))

        assert result.value.address == make_address_dto()

    def test_update_missing_user_never_saves(self, session: Session, user_request: UserRequest):
        service = UserService(session)
        repo = MagicMock(spec=UserRepository)
        repo.get.return_value = None
        service._user_repo = repo

        result = service.update("missing", user_request)

        assert result.is_not_found
        repo.save.assert_not_called()


class TestQueries:
    def test_get_by_id(self, service: UserService, saved_user: UserResponse):
        result = service.get_by_id(saved_user.id)

        assert result.ok
        assert result.value.email == saved_user.email

    def test_get_missing(self, service: UserService):
        assert service.get_by_id("missing").is_not_found

    def test_soft_deleted_user_is_still_readable(self, service: UserService, saved_user: UserResponse):
        service.soft_delete(saved_user.id)

        result = service.get_by_id(saved_user.id)

        assert result.ok
        assert result.value.active is False

    def test_list_all_and_active(self, service: UserService, saved_user: UserResponse):
        other = service.create(make_user_request(first_name="Jane", email="jane@example.com"))
        service.soft_delete(saved_user.id)

        assert [u.id for u in service.list_active()] == [other.id]
        assert {u.id for u in service.list_all()} == {saved_user.id, other.id}

    def test_search(self, service: UserService, saved_user: UserResponse):
        service.create(make_user_request(first_name="Jane", last_name="Roe", email="jane@example.com"))

        assert [u.id for u in service.search("DOE")] == [saved_user.id]
        assert service.search(None) == []


    @pytest.mark.parametrize("keyword", ["", None, "DoE"])
    def test_search_passes_keyword_through(self, session: Session, keyword):
        service = UserService(session)
        repo = MagicMock(spec=UserRepository)
        repo.search.return_value = []
        service._user_repo = repo

        assert service.search(keyword) == []
        repo.search.assert_called_once_with(keyword)


class TestSoftDelete:
    def test_soft_delete(self, service: UserService, saved_user: UserResponse):
        assert service.soft_delete(saved_user.id).ok
        assert service.soft_delete(saved_user.id).ok

    def test_soft_delete_missing(self, service: UserService):
        assert service.soft_delete("missing").is_not_found
