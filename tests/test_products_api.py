import json
from decimal import Decimal

from sqlalchemy.exc import DataError

from app.data.models import ProductModel
from app.repos.product_repo import ProductRepo


def product_payload(seller_id, **overrides):
    payload = {
        "sellerId": seller_id,
        "title": "Hand-carved Bowl",
        "description": "Walnut bowl, carved and oiled by hand",
        "price": "15.00",
        "quantityAvailable": 3,
        "category": "home_decor",
        "images": ["/uploads/bowl-1.png", "/uploads/bowl-2.png"],
        "imageBinaries": json.dumps({"/uploads/bowl-1.png": "data:image/png;base64,AAA"}),
    }
    payload.update(overrides)
    return payload


def test_create_product(client, seller, db):
    resp = client.post("/api/products", json=product_payload(seller.id))

    assert resp.status_code == 201
    body = resp.json()
    assert body["sellerId"] == seller.id
    assert Decimal(body["price"]) == Decimal("15.00")
    assert body["quantityAvailable"] == 3
    assert body["images"] == ["/uploads/bowl-1.png", "/uploads/bowl-2.png"]
    assert body["imageBinaries"] == {"/uploads/bowl-1.png": "data:image/png;base64,AAA"}

    stored = db.get(ProductModel, body["id"])
    assert stored.image_binaries == {"/uploads/bowl-1.png": "data:image/png;base64,AAA"}


def test_create_product_accepts_binaries_object(client, seller):
    payload = product_payload(seller.id, imageBinaries={"/uploads/a.png": "QUFB"})
    resp = client.post("/api/products", json=payload)

    assert resp.status_code == 201
    assert resp.json()["imageBinaries"] == {"/uploads/a.png": "QUFB"}


def test_create_product_unknown_seller(client, seller):
    resp = client.post("/api/products", json=product_payload(seller.id + 100))

    assert resp.status_code == 400
    assert resp.json()["detail"] == "Seller does not exist"


def test_create_product_rejects_negative_price(client, seller):
    resp = client.post("/api/products", json=product_payload(seller.id, price="-1"))
    assert resp.status_code == 422


def test_create_product_rejects_broken_binaries(client, seller):
    resp = client.post("/api/products", json=product_payload(seller.id, imageBinaries="{oops"))
    assert resp.status_code == 422


def test_get_and_list_products(client, seller):
    created = client.post("/api/products", json=product_payload(seller.id)).json()
    client.post("/api/products", json=product_payload(seller.id, title="Second bowl"))

    resp = client.get(f"/api/products/{created['id']}")
    assert resp.status_code == 200
    assert resp.json()["title"] == "Hand-carved Bowl"

    listed = client.get("/api/products", params={"sellerId": seller.id}).json()
    assert [p["title"] for p in listed] == ["Hand-carved Bowl", "Second bowl"]
    assert client.get("/api/products", params={"sellerId": seller.id + 1}).json() == []


def test_get_missing_product(client):
    resp = client.get("/api/products/12345")
    assert resp.status_code == 404


def test_update_product_sets_updated_at(client, seller, db):
    created = client.post("/api/products", json=product_payload(seller.id)).json()

    resp = client.put(
        f"/api/products/{created['id']}",
        json=product_payload(seller.id, title="Hand-carved Walnut Bowl", quantityAvailable=0),
    )

    assert resp.status_code == 200
    body = resp.json()
    assert body["title"] == "Hand-carved Walnut Bowl"
    assert body["quantityAvailable"] == 0
    assert body["updatedAt"] >= created["updatedAt"]
    assert body["createdAt"] == created["createdAt"]


def test_update_product_of_another_seller(client, seller, buyer):
    created = client.post("/api/products", json=product_payload(seller.id)).json()

    resp = client.put(f"/api/products/{created['id']}", json=product_payload(buyer.id))

    assert resp.status_code == 403


def test_update_missing_product(client, seller):
    resp = client.put("/api/products/999", json=product_payload(seller.id))
    assert resp.status_code == 404


def test_form_update_keeps_color_and_variant_options(client, seller, db):
    created = client.post(
        "/api/products",
        json=product_payload(seller.id, colorOptions=["red", "blue"], variants=["small"]),
    ).json()

    # formularz sprzedawcy nie wysyla colorOptions ani variants
    resp = client.put(f"/api/products/{created['id']}", json=product_payload(seller.id, title="Walnut Bowl"))

    assert resp.status_code == 200
    body = resp.json()
    assert body["title"] == "Walnut Bowl"
    assert body["colorOptions"] == ["red", "blue"]
    assert body["variants"] == ["small"]

    db.expire_all()
    stored = db.get(ProductModel, created["id"])
    assert stored.color_options == ["red", "blue"]
    assert stored.variants == ["small"]


def test_quantity_above_integer_column_rejected(client, seller):
    resp = client.post("/api/products", json=product_payload(seller.id, quantityAvailable=2**31))
    assert resp.status_code == 422

    resp = client.post("/api/products", json=product_payload(seller.id, quantityAvailable=2**31 - 1))
    assert resp.status_code == 201


def test_data_error_becomes_bad_request(client, seller, monkeypatch):
    def overflow(self, product):
        raise DataError("INSERT INTO products ...", {}, Exception("integer out of range"))

    monkeypatch.setattr(ProductRepo, "save_product", overflow)

    resp = client.post("/api/products", json=product_payload(seller.id))

    assert resp.status_code == 400
    assert resp.json()["detail"] == "Product violates a database constraint"
