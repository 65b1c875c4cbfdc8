# bookstore/api/routers/categories.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from bookstore.api.pagination import page_params
from bookstore.api.security import admin_only, any_user
from bookstore.data.database import get_db
from bookstore.domain.schemas import BookWithoutCategoryIdsOut, CategoryOut, CategoryRequest
from bookstore.repos.pagination import PageRequest
from bookstore.services.book_service import BookService
from bookstore.services.category_service import CategoryService

router = APIRouter(prefix="/categories", tags=["categories"])


def get_service(db: Session):
    return CategoryService(db)


@router.post("", response_model=CategoryOut, status_code=201, dependencies=[Depends(admin_only)])
def create_category(payload: CategoryRequest, db: Session = Depends(get_db)):
    return get_service(db).create(payload)


@router.get("", response_model=List[CategoryOut], dependencies=[Depends(any_user)])
def list_categories(page: PageRequest = Depends(page_params), db: Session = Depends(get_db)):
    return get_service(db).list(page)


@router.get("/{category_id}", response_model=CategoryOut, dependencies=[Depends(any_user)])
def get_category(category_id: int, db: Session = Depends(get_db)):
    return get_service(db).get_by_id(category_id)


@router.put("/{category_id}", response_model=CategoryOut, dependencies=[Depends(admin_only)])
def update_category(category_id: int, payload: CategoryRequest, db: Session = Depends(get_db)):
    return get_service(db).update(category_id, payload)


@router.delete("/{category_id}", status_code=204, dependencies=[Depends(admin_only)])
def delete_category(category_id: int, db: Session = Depends(get_db)):
    get_service(db).soft_delete(category_id)


@router.get(
    "/{category_id}/books",
    response_model=List[BookWithoutCategoryIdsOut],
    dependencies=[Depends(any_user)],
)
def list_category_books(
    category_id: int,
    page: PageRequest = Depends(page_params),
    db: Session = Depends(get_db),
):
    return BookService(db).list_by_category(category_id, page)
