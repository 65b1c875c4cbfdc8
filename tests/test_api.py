from decimal import Decimal

from bookstore.data.models import BookModel, CategoryModel, UserModel
from tests.factories import ISBN_A, ISBN_B, PASSWORD, auth_headers, make_book, make_category


def _book_payload(**overrides):
    data = {
        "title": "Shadows of Forgotten Ancestors",
        "author": "Mykhailo Kotsiubynsky",
        "isbn": ISBN_A,
        "price": 15.5,
        "description": "Carpathian novella",
        "cover_image": "shadows.png",
        "category_ids": [],
    }
    data.update(overrides)
    return data


# =====================================================
# AUTH
# =====================================================
def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_registration_and_login(client):
    payload = {
        "email": "reader@example.com",
        "password": "password123",
        "repeat_password": "password123",
        "first_name": "Jane",
        "last_name": "Reader",
        "shipping_address": "Kharkiv",
    }
    response = client.post("/auth/registration", json=payload)
    assert response.status_code == 201
    body = response.json()
    assert body["email"] == "reader@example.com"
    assert "password" not in body

    duplicate = client.post("/auth/registration", json=payload)
    assert duplicate.status_code == 409
    assert duplicate.json()["code"] == "REGISTRATION_ERROR"

    login = client.post("/auth/login", json={"email": "reader@example.com", "password": "password123"})
    assert login.status_code == 200
    token = login.json()["token"]

    books = client.get("/books", headers={"Authorization": f"Bearer {token}"})
    assert books.status_code == 200


def test_registration_password_mismatch_is_bad_request(client):
    response = client.post(
        "/auth/registration",
        json={
            "email": "reader@example.com",
            "password": "password123",
            "repeat_password": "password999",
            "first_name": "Jane",
            "last_name": "Reader",
        },
    )
    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_ERROR"


def test_login_failure_does_not_reveal_field(client, user):
    wrong_password = client.post("/auth/login", json={"email": user.email, "password": "wrongpass1"})
    unknown_email = client.post("/auth/login", json={"email": "nobody@example.com", "password": PASSWORD})

    assert wrong_password.status_code == 401
    assert unknown_email.status_code == 401
    assert wrong_password.json()["message"] == unknown_email.json()["message"]


def test_missing_or_bad_token_is_unauthorized(client):
    assert client.get("/books").status_code == 401
    assert client.get("/books", headers={"Authorization": "Bearer garbage"}).status_code == 401


# =====================================================
# BOOKS / CATEGORIES
# =====================================================
def test_user_cannot_manage_books(client, user):
    response = client.post("/books", json=_book_payload(), headers=auth_headers(user))
    assert response.status_code == 403
    assert response.json()["error"] is True


def test_admin_book_lifecycle(client, db, admin):
    headers = auth_headers(admin)
    category = make_category(db, "Classics")

    created = client.post("/books", json=_book_payload(category_ids=[category.id]), headers=headers)
    assert created.status_code == 201
    book = created.json()
    assert book["category_ids"] == [category.id]
    assert Decimal(book["price"]) == Decimal("15.5")

    fetched = client.get(f"/books/{book['id']}", headers=headers)
    assert fetched.json() == book

    updated = client.put(
        f"/books/{book['id']}", json=_book_payload(title="Renamed", isbn=ISBN_B), headers=headers
    )
    assert updated.status_code == 200
    assert updated.json()["title"] == "Renamed"
    assert updated.json()["category_ids"] == []

    deleted = client.delete(f"/books/{book['id']}", headers=headers)
    assert deleted.status_code == 204

    missing = client.get(f"/books/{book['id']}", headers=headers)
    assert missing.status_code == 404
    assert str(book["id"]) in missing.json()["message"]

    db.expire_all()
    assert db.get(BookModel, book["id"]).is_deleted is True


def test_create_book_validation_error(client, admin):
    response = client.post("/books", json=_book_payload(isbn="123"), headers=auth_headers(admin))
    assert response.status_code == 400
    assert response.json()["details"]


def test_missing_book_operations_return_404(client, admin):
    headers = auth_headers(admin)
    assert client.put("/books/99", json=_book_payload(), headers=headers).status_code == 404
    assert client.delete("/books/99", headers=headers).status_code == 404


def test_search_endpoint(client, db, user):
    make_book(db, title="Cheap", price="5.00")
    make_book(db, title="Mid", price="15.00")
    make_book(db, title="Pricey", price="50.00")
    headers = auth_headers(user)

    ranged = client.get("/books/search", params={"price": ["10", "20"]}, headers=headers)
    assert [b["title"] for b in ranged.json()] == ["Mid"]

    comma = client.get("/books/search?title=Cheap,Pricey", headers=headers)
    assert [b["title"] for b in comma.json()] == ["Cheap", "Pricey"]

    bad = client.get("/books/search", params={"price": "ten"}, headers=headers)
    assert bad.status_code == 400

    everything = client.get("/books/search", headers=headers)
    assert everything.json() == client.get("/books", headers=headers).json()


def test_list_books_paging_params(client, db, user):
    for i in range(3):
        make_book(db, title=f"B{i}")
    headers = auth_headers(user)

    page = client.get("/books", params={"page": 1, "size": 2}, headers=headers)
    assert [b["title"] for b in page.json()] == ["B2"]

    bad_sort = client.get("/books", params={"sort": "nope,asc"}, headers=headers)
    assert bad_sort.status_code == 400


def test_categories_and_books_by_category(client, db, admin, user):
    created = client.post("/categories", json={"name": "Poetry"}, headers=auth_headers(admin))
    assert created.status_code == 201
    category_id = created.json()["id"]

    category = db.get(CategoryModel, category_id)
    make_book(db, title="Kobzar", categories=[category])

    books = client.get(f"/categories/{category_id}/books", headers=auth_headers(user))
    assert books.status_code == 200
    assert [b["title"] for b in books.json()] == ["Kobzar"]
    assert "category_ids" not in books.json()[0]

    assert client.post("/categories", json={"name": "X"}, headers=auth_headers(user)).status_code == 403
    assert client.get("/categories/999", headers=auth_headers(user)).status_code == 404
    assert client.delete(f"/categories/{category_id}", headers=auth_headers(admin)).status_code == 204
    assert client.get(f"/categories/{category_id}", headers=auth_headers(user)).status_code == 404


# =====================================================
# CART / ORDERS
# =====================================================
def test_cart_and_order_flow(client, db, user, admin):
    book = make_book(db, title="Dune", price="10.00")
    headers = auth_headers(user)

    # koszyk musi istniec przed dodaniem pozycji
    assert client.post("/cart", json={"book_id": book.id, "quantity": 2}, headers=headers).status_code == 404

    cart = client.get("/cart", headers=headers)
    assert cart.status_code == 200
    assert cart.json() == {"id": user.id, "user_id": user.id, "cart_items": []}

    added = client.post("/cart", json={"book_id": book.id, "quantity": 2}, headers=headers)
    assert added.status_code == 200
    item = added.json()["cart_items"][0]
    assert (item["book_id"], item["book_title"], item["quantity"]) == (book.id, "Dune", 2)

    again = client.post("/cart", json={"book_id": book.id, "quantity": 1}, headers=headers)
    assert again.status_code == 409

    updated = client.put(f"/cart/cart-items/{item['id']}", json={"quantity": 3}, headers=headers)
    assert updated.json()["cart_items"][0]["quantity"] == 3
    assert client.put("/cart/cart-items/999", json={"quantity": 3}, headers=headers).status_code == 404
    assert client.put(f"/cart/cart-items/{item['id']}", json={"quantity": 0}, headers=headers).status_code == 400

    order = client.post("/orders", json={"shipping_address": "Kyiv"}, headers=headers)
    assert order.status_code == 200
    body = order.json()
    assert body["status"] == "PENDING"
    assert Decimal(body["total"]) == Decimal("30")
    assert body["user_id"] == user.id
    assert client.get("/cart", headers=headers).json()["cart_items"] == []

    empty = client.post("/orders", json={"shipping_address": "Kyiv"}, headers=headers)
    assert empty.status_code == 404

    orders = client.get("/orders", headers=headers).json()
    assert [o["id"] for o in orders] == [body["id"]]

    items = client.get(f"/orders/{body['id']}/items", headers=headers).json()
    assert [(i["book_id"], i["quantity"]) for i in items] == [(book.id, 3)]
    one = client.get(f"/orders/{body['id']}/items/{items[0]['id']}", headers=headers)
    assert one.json() == items[0]
    assert client.get(f"/orders/{body['id']}/items/999", headers=headers).status_code == 404

    # status zmienia tylko admin
    assert client.patch(f"/orders/{body['id']}", json={"status": "COMPLETED"}, headers=headers).status_code == 403
    patched = client.patch(f"/orders/{body['id']}", json={"status": "COMPLETED"}, headers=auth_headers(admin))
    assert patched.status_code == 200
    assert patched.json()["status"] == "COMPLETED"
    assert client.patch("/orders/999", json={"status": "CANCELED"}, headers=auth_headers(admin)).status_code == 404
    assert client.patch(f"/orders/{body['id']}", json={"status": "LOST"}, headers=auth_headers(admin)).status_code == 400


def test_remove_cart_item(client, db, user):
    book = make_book(db)
    headers = auth_headers(user)
    client.get("/cart", headers=headers)
    item_id = client.post("/cart", json={"book_id": book.id, "quantity": 1}, headers=headers).json()["cart_items"][0]["id"]

    response = client.delete(f"/cart/cart-items/{item_id}", headers=headers)

    assert response.status_code == 200
    assert response.json()["cart_items"] == []
    assert client.delete(f"/cart/cart-items/{item_id}", headers=headers).status_code == 404


def test_cart_identity_comes_from_token(client, db, user):
    other = db.query(UserModel).filter(UserModel.id == user.id).one()
    headers = auth_headers(other)
    cart = client.get("/cart", headers=headers).json()
    assert cart["user_id"] == user.id


def test_books_of_deleted_category_are_hidden(client, db, admin, user):
    category = make_category(db, "Gone")
    make_book(db, title="InGone", categories=[category])

    client.delete(f"/categories/{category.id}", headers=auth_headers(admin))
    response = client.get(f"/categories/{category.id}/books", headers=auth_headers(user))

    assert response.status_code == 200
    assert response.json() == []


def test_framework_errors_use_error_body(client, user):
    unknown = client.get("/no-such-route")
    assert unknown.status_code == 404
    assert unknown.json() == {
        "error": True,
        "code": "NOT_FOUND",
        "message": "Not Found",
        "status_code": 404,
    }

    wrong_method = client.put("/cart", json={}, headers=auth_headers(user))
    assert wrong_method.status_code == 405
    assert wrong_method.json()["code"] == "METHOD_NOT_ALLOWED"
    assert "GET" in wrong_method.headers["allow"]
