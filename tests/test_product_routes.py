"""Catalog and admin product management"""

import os

from getfurnitures.core.config import settings
from tests.conftest import PNG_BYTES, add_product, auth_header


def stored_file(image):
    return os.path.join(settings.UPLOAD_DIR, "products", image["filename"])


def test_add_product_stores_images(client, admin_token):
    response = add_product(client, admin_token, images=2)

    assert response.status_code == 201
    product = response.json()["product"]
    assert product["modelName"] == "Oslo"
    assert product["manufacturerPhone"] == "9000000001"
    assert len(product["images"]) == 2

    image = product["images"][0]
    assert image["filename"].endswith("_photo0.png")
    assert image["path"] == f"uploads/products/{image['filename']}"
    assert os.path.exists(stored_file(image))

    served = client.get(f"/{image['path']}")
    assert served.status_code == 200
    assert served.content == PNG_BYTES


def test_add_product_validation(client, admin_token):
    cases = [
        add_product(client, admin_token, images=0),
        add_product(client, admin_token, images=6),
        add_product(client, admin_token, modelName=""),
        add_product(client, admin_token, category="lamp"),
        add_product(client, admin_token, minPrice="500", maxPrice="100"),
    ]
    for response in cases:
        assert response.status_code == 400
        assert response.json()["code"] == "validation_error"

    assert client.get("/private/get-all-products", headers=auth_header(admin_token)).json() == []


def test_add_product_rejects_non_images(client, admin_token):
    response = client.post(
        "/private/add-product",
        data={
            "modelName": "Oslo", "category": "sofa", "minPrice": "1", "maxPrice": "2",
            "manufacturerName": "Ravi", "manufacturerPhone": "9", "factoryName": "RW",
        },
        files=[("images", ("notes.txt", b"hello", "text/plain"))],
        headers=auth_header(admin_token)
    )

    assert response.status_code == 400
    assert response.json()["message"] == "Only image files are allowed: notes.txt"


def test_add_product_rejects_large_files(client, admin_token, monkeypatch):
    monkeypatch.setattr(settings, "MAX_FILE_SIZE", 16)

    response = add_product(client, admin_token)
    assert response.status_code == 400
    assert "too large" in response.json()["message"]


def test_catalog_projection_and_filters(client, admin_token, user_token, product_id):
    add_product(client, admin_token, modelName="Dream", category="bed", manufacturerPhone="9000000002")
    headers = auth_header(user_token)

    catalog = client.get("/private/products", headers=headers).json()
    assert len(catalog) == 2
    assert "manufacturerPhone" not in catalog[0]
    assert {"id", "modelName", "category", "priceRange", "images", "factoryName"} <= set(catalog[0])

    sofas = client.get("/private/products/sofa", headers=headers).json()
    assert [p["id"] for p in sofas] == [product_id]

    by_model = client.get("/private/products/Dream", headers=headers).json()
    assert [p["modelName"] for p in by_model] == ["Dream"]

    assert client.get("/private/products/chair", headers=headers).json() == []

    by_maker = client.get("/private/products-man/9000000002", headers=auth_header(admin_token)).json()
    assert [p["modelName"] for p in by_maker] == ["Dream"]


def test_delete_product_keeps_order_snapshot(client, admin_token, user_token, product_id):
    product = client.get("/private/get-all-products", headers=auth_header(admin_token)).json()[0]
    client.post(f"/private/place-order/{product_id}", headers=auth_header(user_token))

    deleted = client.delete(f"/private/delete-product/{product_id}", headers=auth_header(admin_token))
    assert deleted.status_code == 200
    assert not os.path.exists(stored_file(product["images"][0]))

    assert client.get("/private/products", headers=auth_header(user_token)).json() == []

    history = client.get("/private/order-history", headers=auth_header(user_token)).json()
    assert history[0]["modelName"] == "Oslo"
    assert history[0]["productId"] == product_id
    assert history[0]["priceRange"] == {"min": 15000.0, "max": 22000.0}

    again = client.delete(f"/private/delete-product/{product_id}", headers=auth_header(admin_token))
    assert again.status_code == 404
