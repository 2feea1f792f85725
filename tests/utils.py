from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from fastapi.testclient import TestClient


def create_member(
    client: TestClient, name: str = "Ana", roles: Sequence[str] = ("ux",)
) -> dict[str, Any]:
    response = client.post("/api/members", json={"name": name, "roles": list(roles)})
    assert response.status_code == 201, response.text
    return response.json()


def create_assignment(
    client: TestClient,
    title: str = "Design",
    description: str = "Wireframes for the login page",
    category: str = "ux",
) -> dict[str, Any]:
    response = client.post(
        "/api/assignments",
        json={"title": title, "description": description, "category": category},
    )
    assert response.status_code == 201, response.text
    return response.json()


def assign(client: TestClient, assignment_id: str, member_id: str):
    return client.post(
        "/api/assignments/assign",
        json={"assignmentId": assignment_id, "memberId": member_id},
    )


def find_assignment(client: TestClient, assignment_id: str) -> dict[str, Any] | None:
    board = client.get("/api/board").json()
    return next((item for item in board["assignments"] if item["id"] == assignment_id), None)
