"""HTTP helpers shared by the API flow tests."""
from __future__ import annotations

from itertools import count

from fastapi.testclient import TestClient

_inn_sequence = count(5000000001)


def create_company(client: TestClient, *, company_type: str = "JSC") -> dict:
    response = client.post(
        "/api/companies",
        json={
            "title": "АО Вектор",
            "inn": next(_inn_sequence),
            "company_type": company_type,
            "has_board_of_directors": True,
        },
    )
    assert response.status_code == 201, response.text
    return response.json()


def create_participant(
    client: TestClient, company_id: str, name: str, *, share: float = 0.0, type: str = "OWNER"
) -> dict:
    response = client.post(
        f"/api/companies/{company_id}/participants",
        json={"name": name, "share": share, "type": type},
    )
    assert response.status_code == 201, response.text
    return response.json()


def create_meeting(client: TestClient, company_id: str, *, type: str = "FMS") -> dict:
    response = client.post(
        f"/api/companies/{company_id}/meetings",
        json={"type": type, "date": "2024-10-15", "address": "Казань, ул. Баумана, 5"},
    )
    assert response.status_code == 201, response.text
    return response.json()


def meeting_url(meeting: dict) -> str:
    return f"/api/companies/{meeting['company_id']}/meetings/{meeting['id']}"


def seat(client: TestClient, meeting: dict, *participants: dict) -> list[dict]:
    response = client.post(
        f"{meeting_url(meeting)}/participants",
        json=[{"participant_id": item["id"], "is_present": True} for item in participants],
    )
    assert response.status_code == 201, response.text
    return response.json()


def create_topic(client: TestClient, meeting: dict, title: str = "Выплата дивидендов") -> dict:
    response = client.post(f"{meeting_url(meeting)}/topics", json={"title": title})
    assert response.status_code == 201, response.text
    return response.json()


def voting_url(meeting: dict, topic: dict) -> str:
    return f"{meeting_url(meeting)}/topics/{topic['id']}/voting"
