# tests/test_api.py

import pytest
from datetime import date, timedelta
from fastapi.testclient import TestClient
from api.dependencies import get_books_options, get_db, get_google_books_client
from api.main import app
from bookshelf.config import BooksOptions
from tests.utils import USER_0, USER_1, USER_2, USER_3, GATSBY_ID, GREEN_MILE_ID

@pytest.fixture
def client(seeded_database, google_books_client):
    def override_get_db():
        session = seeded_database.get_session()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_google_books_client] = lambda: google_books_client
    app.dependency_overrides[get_books_options] = lambda: BooksOptions()
    yield TestClient(app)
    app.dependency_overrides.clear()

def as_user(user_id):
    return {"X-User-Id": user_id}

def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"message": "bookshelf"}

def test_missing_user_header(client):
    assert client.get("/library").status_code == 422
    assert client.get("/library", headers=as_user(" ")).status_code == 401

def test_get_library(client):
    response = client.get("/library", params={"page": 3}, headers=as_user(USER_0))
    assert response.status_code == 200
    data = response.json()
    assert data["total_count"] == 25
    assert data["page"] == 3
    assert data["limit"] == 10
    assert len(data["results"]) == 5

def test_get_library_search_and_order(client):
    response = client.get(
        "/library",
        params={"search": "libro 1", "order_by": "rating", "ascending": False, "limit": 3},
        headers=as_user(USER_1)
    )
    data = response.json()
    assert data["total_count"] == 3
    assert [book["id"] for book in data["results"]] == ["BookId1", "BookId11", "BookId10"]

def test_get_library_unknown_order_key(client):
    response = client.get("/library", params={"order_by": "isbn"}, headers=as_user(USER_1))
    titles = [book["title"] for book in response.json()["results"]]
    assert titles == sorted(titles)

def test_get_library_book(client):
    response = client.get("/library/BookId3", headers=as_user(USER_0))
    assert response.status_code == 200
    data = response.json()
    assert data["reading_state"] == "3"
    assert data["reading_state_label"] == "Read"
    assert data["final_time"] == (date.today() - timedelta(days=3)).isoformat()

def test_get_library_book_not_found(client):
    response = client.get("/library/BookId3", headers=as_user(USER_2))
    assert response.status_code == 404

def test_edit_library_book(client):
    started = (date.today() - timedelta(days=4)).isoformat()
    response = client.put(
        "/library/BookId0",
        json={"rating": 4, "tag": "2", "reading_state": "1", "initial_time": started},
        headers=as_user(USER_0)
    )
    assert response.status_code == 200
    data = response.json()
    assert data["rating"] == 4
    assert data["tag_label"] == "Mystery"
    assert data["initial_time"] == started

def test_edit_library_book_invalid(client):
    response = client.put("/library/BookId0", json={"rating": 9}, headers=as_user(USER_0))
    assert response.status_code == 400
    assert "Rating" in response.json()["detail"]

def test_add_and_remove_library_book(client):
    response = client.post(f"/library/{GREEN_MILE_ID}", headers=as_user(USER_2))
    assert response.status_code == 201
    assert response.json()["title"] == "Il miglio verde"

    assert client.get("/library", headers=as_user(USER_2)).json()["total_count"] == 1

    response = client.delete(f"/library/{GREEN_MILE_ID}", headers=as_user(USER_2))
    assert response.status_code == 204
    assert client.get("/library", headers=as_user(USER_2)).json()["total_count"] == 0

    # The catalog keeps the book
    assert client.get(f"/books/{GREEN_MILE_ID}").status_code == 200

def test_add_library_book_upstream_failure(client):
    response = client.post("/library/unknown-volume", headers=as_user(USER_2))
    assert response.status_code == 502

def test_add_library_book_twice(client):
    response = client.post("/library/BookId0", headers=as_user(USER_0))
    assert response.status_code == 400

def test_get_catalog_book(client):
    response = client.get("/books/BookId33")
    assert response.status_code == 200
    data = response.json()
    assert data["title"] == "Libro 33"
    assert data["rating"] is None
    assert client.get("/books/missing").status_code == 404

def test_wishlist(client):
    response = client.get("/wishlist", headers=as_user(USER_0))
    assert response.json()["total_count"] == 6

    response = client.post("/wishlist/BookId33", headers=as_user(USER_0))
    assert response.status_code == 201
    assert response.json()["id"] == "BookId33"

    response = client.delete(f"/wishlist/{GATSBY_ID}", headers=as_user(USER_0))
    assert response.status_code == 204
    assert client.get("/wishlist", headers=as_user(USER_0)).json()["total_count"] == 6

def test_wishlist_errors(client):
    assert client.post("/wishlist/BookId28", headers=as_user(USER_1)).status_code == 400
    assert client.post("/wishlist/BookId0", headers=as_user(USER_1)).status_code == 400
    assert client.delete("/wishlist/BookId0", headers=as_user(USER_1)).status_code == 404

def test_search_users(client):
    response = client.get("/users", params={"search": "a"}, headers=as_user(USER_0))
    assert response.status_code == 200
    assert [user["id"] for user in response.json()["results"]] == [USER_1, USER_2]

def test_get_user_books(client):
    response = client.get(f"/users/{USER_1}/books", params={"page": 2}, headers=as_user(USER_0))
    assert response.status_code == 200
    data = response.json()
    assert data["total_count"] == 12
    assert len(data["results"]) == 2

def test_get_hidden_user_books(client):
    """Test that a hidden library is visible only to its owner."""
    assert client.get(f"/users/{USER_3}/books", headers=as_user(USER_0)).status_code == 404
    assert client.get(f"/users/{USER_3}/books", headers=as_user(USER_3)).status_code == 200
    assert client.get("/users/no-such-user/books", headers=as_user(USER_0)).status_code == 404

def test_edit_library_book_keeps_rating_when_omitted(client):
    response = client.put("/library/BookId3", json={"tag": "1"}, headers=as_user(USER_0))
    assert response.status_code == 200
    assert response.json()["rating"] == 3
    assert response.json()["tag_label"] == "Non-fiction"

    assert client.get("/library/BookId3", headers=as_user(USER_0)).json()["rating"] == 3
