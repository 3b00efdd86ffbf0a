"""Request helpers for API tests."""


def auth_headers(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


async def register_user(api, email="ada@example.com", password="secret1", name="Ada") -> dict:
    response = await api.post("/auth/register", json={"email": email, "password": password, "name": name})
    assert response.status_code == 201, response.text
    return response.json()


async def create_model(api, token, **overrides) -> dict:
    payload = {
        "name": "Modern Chair",
        "category": "Furniture",
        "modelUrl": "https://example.com/models/chair.glb",
        "thumbnail": "https://example.com/thumbs/chair.jpg",
        "description": "A modern comfortable chair",
    }
    payload.update(overrides)
    response = await api.post("/models", json=payload, headers=auth_headers(token))
    assert response.status_code == 201, response.text
    return response.json()
