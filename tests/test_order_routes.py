"""Order placement and lifecycle over HTTP"""

from getfurnitures.core.config import settings
from tests.conftest import auth_header, register_user


def place(client, token, product_id):
    return client.post(f"/private/place-order/{product_id}", headers=auth_header(token))


def test_place_order_snapshots_and_notifies(client, email_service, user_token, product_id):
    response = place(client, user_token, product_id)

    assert response.status_code == 201
    order = response.json()["order"]
    assert order["status"] == "pending"
    assert order["modelName"] == "Oslo"
    assert order["userName"] == "Jane Doe"
    assert order["priceRange"] == {"min": 15000.0, "max": 22000.0}
    assert order["productImage"]["mimetype"] == "image/png"
    assert "userId" not in order

    assert "Order Confirmation - GetFurniture" in email_service.subjects_for("jane@example.com")
    assert "New Order Received - GetFurniture" in email_service.subjects_for(settings.ADMIN_EMAIL)


def test_live_order_blocks_reorder_until_completed(client, user_token, admin_token, product_id):
    first = place(client, user_token, product_id)
    second = place(client, user_token, product_id)

    assert first.status_code == 201
    assert second.status_code == 400
    assert second.json() == {"code": "conflict", "message": "Order already placed"}

    order_id = first.json()["order"]["id"]
    completed = client.get(f"/private/completeorder/{order_id}", headers=auth_header(admin_token))
    assert completed.status_code == 200
    assert completed.json()["order"]["status"] == "completed"
    assert completed.json()["order"]["completedAt"]

    third = place(client, user_token, product_id)
    assert third.status_code == 201
    assert third.json()["order"]["id"] != order_id

    history = client.get("/private/order-history", headers=auth_header(user_token)).json()
    assert [o["status"] for o in history] == ["pending", "completed"]


def test_place_order_unknown_product(client, user_token):
    response = place(client, user_token, "00000000-0000-0000-0000-000000000000")
    assert response.status_code == 404


def test_malformed_id_is_validation_error(client, user_token):
    response = place(client, user_token, "abc")

    assert response.status_code == 400
    assert response.json()["code"] == "validation_error"


def test_cancel_keeps_history_and_frees_the_product(client, email_service, user_token, product_id):
    order_id = place(client, user_token, product_id).json()["order"]["id"]

    register_user(client, email="sam@example.com")
    otp = email_service.otps["sam@example.com"]
    other_token = client.post("/public/email-otp", json={"email": "sam@example.com", "otp": otp}).json()["token"]

    stranger = client.delete(f"/private/cancel-order/{order_id}", headers=auth_header(other_token))
    assert stranger.status_code == 404

    cancelled = client.delete(f"/private/cancel-order/{order_id}", headers=auth_header(user_token))
    assert cancelled.status_code == 200

    again = client.delete(f"/private/cancel-order/{order_id}", headers=auth_header(user_token))
    assert again.status_code == 400
    assert again.json()["code"] == "conflict"

    history = client.get("/private/order-history", headers=auth_header(user_token)).json()
    assert len(history) == 1
    assert history[0]["status"] == "cancelled"
    assert history[0]["cancelledAt"]

    assert place(client, user_token, product_id).status_code == 201


def test_admin_queue_scopes(client, user_token, admin_token, product_id):
    order_id = place(client, user_token, product_id).json()["order"]["id"]
    headers = auth_header(admin_token)

    pending = client.get("/private/getallorders", headers=headers).json()
    assert [o["id"] for o in pending] == [order_id]
    assert pending[0]["userId"]

    moved = client.patch(f"/private/order-status/{order_id}", json={"status": "contacted"}, headers=headers)
    assert moved.status_code == 200
    assert moved.json()["order"]["status"] == "contacted"

    assert client.get("/private/getallorders", headers=headers).json() == []
    assert len(client.get("/private/getallorders?scope=live", headers=headers).json()) == 1
    assert len(client.get("/private/getallorders?scope=all", headers=headers).json()) == 1


def test_advance_order_follows_transitions(client, user_token, admin_token, product_id):
    order_id = place(client, user_token, product_id).json()["order"]["id"]
    headers = auth_header(admin_token)
    url = f"/private/order-status/{order_id}"

    assert client.patch(url, json={"status": "in-process"}, headers=headers).status_code == 200

    backwards = client.patch(url, json={"status": "contacted"}, headers=headers)
    assert backwards.status_code == 400
    assert backwards.json()["code"] == "conflict"

    not_a_step = client.patch(url, json={"status": "completed"}, headers=headers)
    assert not_a_step.json()["code"] == "validation_error"

    unknown_status = client.patch(url, json={"status": "shipped"}, headers=headers)
    assert unknown_status.status_code == 400


def test_complete_terminal_order_is_conflict(client, user_token, admin_token, product_id):
    order_id = place(client, user_token, product_id).json()["order"]["id"]
    client.delete(f"/private/cancel-order/{order_id}", headers=auth_header(user_token))

    response = client.get(f"/private/completeorder/{order_id}", headers=auth_header(admin_token))
    assert response.status_code == 400
    assert response.json()["code"] == "conflict"


def test_end_to_end(client, email_service, admin_token, product_id):
    assert register_user(client, email="a@x.com", password="pwd123").status_code == 201
    otp = email_service.otps["a@x.com"]

    verified = client.post("/public/email-otp", json={"email": "a@x.com", "otp": otp})
    assert verified.status_code == 200

    login = client.post("/public/user-login", json={"email": "a@x.com", "password": "pwd123"})
    token = login.json()["token"]

    order = place(client, token, product_id).json()["order"]
    assert order["status"] == "pending"

    completed = client.get(f"/private/completeorder/{order['id']}", headers=auth_header(admin_token))
    assert completed.json()["order"]["status"] == "completed"

    assert place(client, token, product_id).status_code == 201
