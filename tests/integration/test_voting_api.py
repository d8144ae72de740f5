from __future__ import annotations

from fastapi.testclient import TestClient

from tests.integration.helpers import (
    create_company,
    create_meeting,
    create_participant,
    create_topic,
    seat,
    voting_url,
)


def _shareholder_topic(client: TestClient, shares: list[float]) -> tuple[dict, dict, list[dict]]:
    company = create_company(client)
    meeting = create_meeting(client, company["id"], type="FMS")
    owners = [
        create_participant(client, company["id"], f"Акционер {index}", share=share)
        for index, share in enumerate(shares)
    ]
    entries = seat(client, meeting, *owners)
    topic = create_topic(client, meeting)

    voters = client.get(f"{voting_url(meeting, topic)}/voters").json()
    by_entry = {voter["meeting_participant_id"]: voter for voter in voters}
    return meeting, topic, [by_entry[entry["id"]] for entry in entries]


def test_topic_creation_opens_voting(client: TestClient) -> None:
    meeting, topic, voters = _shareholder_topic(client, [70.0, 30.0])

    response = client.get(voting_url(meeting, topic))

    assert response.status_code == 200
    voting = response.json()
    assert voting["topic_id"] == topic["id"]
    assert voting["accepted"] is False
    assert sorted(voting["voter_ids"]) == sorted(voter["id"] for voter in voters)
    assert {voter["vote"] for voter in voters} == {"НЕ ГОЛОСОВАЛ"}
    assert all(voter["related_party_deal"] is False for voter in voters)


def test_make_vote_accepts_share_majority(client: TestClient) -> None:
    meeting, topic, voters = _shareholder_topic(client, [30.0, 25.0, 45.0])

    response = client.post(
        f"{voting_url(meeting, topic)}/make_vote",
        json={
            "voters": [
                {"voter_id": voters[0]["id"], "vote": "ЗА"},
                {"voter_id": voters[1]["id"], "vote": "ЗА", "related_party_deal": True},
                {"voter_id": voters[2]["id"], "vote": "ПРОТИВ"},
            ]
        },
    )

    assert response.status_code == 201, response.text
    assert response.json()["accepted"] is True

    voter = client.get(f"{voting_url(meeting, topic)}/voters/{voters[1]['id']}").json()
    assert voter["vote"] == "ЗА"
    assert voter["related_party_deal"] is True


def test_make_vote_rejects_exactly_half(client: TestClient) -> None:
    meeting, topic, voters = _shareholder_topic(client, [50.0, 50.0])

    response = client.post(
        f"{voting_url(meeting, topic)}/make_vote",
        json={"voters": [{"voter_id": voters[0]["id"], "vote": "ЗА"}]},
    )

    assert response.status_code == 201
    assert response.json()["accepted"] is False


def test_board_meeting_counts_heads(client: TestClient) -> None:
    company = create_company(client)
    meeting = create_meeting(client, company["id"], type="BOD")
    members = [
        create_participant(client, company["id"], name, type="MEMBER_OF_BOARD")
        for name in ("Алексей", "Мария", "Олег")
    ]
    seat(client, meeting, *members)
    topic = create_topic(client, meeting)
    voters = client.get(f"{voting_url(meeting, topic)}/voters").json()

    ballots = [
        {"voter_id": voters[0]["id"], "vote": "ЗА"},
        {"voter_id": voters[1]["id"], "vote": "ЗА"},
        {"voter_id": voters[2]["id"], "vote": "ВОЗДЕРЖАЛСЯ"},
    ]
    response = client.post(f"{voting_url(meeting, topic)}/make_vote", json={"voters": ballots})

    assert response.status_code == 201
    assert response.json()["accepted"] is True


def test_unknown_vote_label_is_bad_request(client: TestClient) -> None:
    meeting, topic, voters = _shareholder_topic(client, [100.0])

    response = client.post(
        f"{voting_url(meeting, topic)}/make_vote",
        json={"voters": [{"voter_id": voters[0]["id"], "vote": "MAYBE"}]},
    )

    assert response.status_code == 400
    assert "MAYBE" in response.json()["detail"]
    voter = client.get(f"{voting_url(meeting, topic)}/voters/{voters[0]['id']}").json()
    assert voter["vote"] == "НЕ ГОЛОСОВАЛ"


def test_unknown_voter_is_not_found(client: TestClient) -> None:
    meeting, topic, _ = _shareholder_topic(client, [100.0])

    response = client.post(
        f"{voting_url(meeting, topic)}/make_vote",
        json={"voters": [{"voter_id": "missing-voter", "vote": "ЗА"}]},
    )

    assert response.status_code == 404
    assert response.json()["detail"] == "Voter 'missing-voter' not found"


def test_voting_on_foreign_meeting_is_not_found(client: TestClient) -> None:
    meeting, topic, voters = _shareholder_topic(client, [100.0])
    other_company = create_company(client)

    url = (
        f"/api/companies/{other_company['id']}/meetings/{meeting['id']}"
        f"/topics/{topic['id']}/voting/make_vote"
    )
    response = client.post(url, json={"voters": [{"voter_id": voters[0]["id"], "vote": "ЗА"}]})

    assert response.status_code == 404


def test_update_voter_related_party_flag(client: TestClient) -> None:
    meeting, topic, voters = _shareholder_topic(client, [100.0])

    response = client.patch(
        f"{voting_url(meeting, topic)}/voters/{voters[0]['id']}",
        json={"related_party_deal": True},
    )

    assert response.status_code == 200
    assert response.json()["related_party_deal"] is True


def test_delete_and_recreate_voting(client: TestClient) -> None:
    meeting, topic, voters = _shareholder_topic(client, [60.0, 40.0])
    url = voting_url(meeting, topic)

    assert client.delete(url).status_code == 204
    assert client.get(url).status_code == 404
    assert client.get(f"{url}/voters").json() == []

    recreated = client.post(url)
    assert recreated.status_code == 200
    body = recreated.json()
    assert body["accepted"] is False
    assert len(body["voter_ids"]) == 2
    assert not set(body["voter_ids"]) & {voter["id"] for voter in voters}


def test_create_voting_is_idempotent(client: TestClient) -> None:
    meeting, topic, _ = _shareholder_topic(client, [100.0])
    url = voting_url(meeting, topic)

    first = client.post(url).json()
    second = client.post(url).json()

    assert first["id"] == second["id"]
    assert first["voter_ids"] == second["voter_ids"]


def test_delete_voter_route_removes_voter(client: TestClient) -> None:
    meeting, topic, voters = _shareholder_topic(client, [60.0, 40.0])
    url = voting_url(meeting, topic)

    assert client.delete(f"{url}/voters/{voters[0]['id']}").status_code == 204

    assert client.get(f"{url}/voters/{voters[0]['id']}").status_code == 404
    assert client.get(url).json()["voter_ids"] == [voters[1]["id"]]
    assert client.delete(f"{url}/voters/{voters[0]['id']}").status_code == 404
