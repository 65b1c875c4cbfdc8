import pytest

from bookstore.data.models import CategoryModel
from bookstore.domain.exceptions import EntityNotFoundError
from bookstore.domain.mappers import category_to_dto, category_to_entity
from bookstore.domain.schemas import CategoryRequest
from bookstore.repos.pagination import PageRequest
from bookstore.services.category_service import CategoryService
from tests.factories import make_category


def test_mapper_round_trip_keeps_name_and_description():
    request = CategoryRequest(name="Sci-Fi", description="Space and robots")
    entity = category_to_entity(request)
    entity.id = 3

    dto = category_to_dto(entity)

    assert (dto.name, dto.description) == (request.name, request.description)


def test_create_and_get(db):
    service = CategoryService(db)
    created = service.create(CategoryRequest(name="History"))
    assert service.get_by_id(created.id) == created


def test_list_skips_deleted(db):
    live = make_category(db, "Live")
    make_category(db, "Dead", is_deleted=True)
    assert [c.id for c in CategoryService(db).list(PageRequest())] == [live.id]


def test_update_replaces_fields(db):
    category = make_category(db, "Old", description="old")
    updated = CategoryService(db).update(category.id, CategoryRequest(name="New"))
    assert (updated.id, updated.name, updated.description) == (category.id, "New", None)


@pytest.mark.parametrize("operation", ["get", "update", "delete"])
def test_missing_category_raises_not_found(db, operation):
    service = CategoryService(db)
    calls = {
        "get": lambda: service.get_by_id(5),
        "update": lambda: service.update(5, CategoryRequest(name="X")),
        "delete": lambda: service.soft_delete(5),
    }
    with pytest.raises(EntityNotFoundError):
        calls[operation]()


def test_soft_delete_keeps_row(db):
    category = make_category(db, "Temp")
    CategoryService(db).soft_delete(category.id)
    db.expire_all()
    assert db.get(CategoryModel, category.id).is_deleted is True
