import uuid

from constants import ErrorMessages
from domain.value_objects import ExerciseDate

NEW_USER = "/api/exercise/new-user"
ADD = "/api/exercise/add"
USERS = "/api/exercise/users"
LOG = "/api/exercise/log"


def create_user(client, name="alice"):
    response = client.post(NEW_USER, json={"username": name})
    assert response.status_code == 200
    return response.json()


def test_new_user_json(client):
    body = create_user(client)
    assert body["username"] == "alice"
    assert uuid.UUID(body["_id"])
    assert set(body) == {"username", "_id"}


def test_new_user_form_encoded(client):
    response = client.post(NEW_USER, data={"username": "bob"})
    assert response.status_code == 200
    assert response.json()["username"] == "bob"


def test_new_user_without_name_is_soft_error(client):
    response = client.post(NEW_USER, json={"username": ""})
    assert response.status_code == 200
    assert response.json() == {"error": ErrorMessages.USERNAME_NOT_PROVIDED}

    response = client.post(NEW_USER)
    assert response.json() == {"error": ErrorMessages.USERNAME_NOT_PROVIDED}
    assert client.get(USERS).json() == []


def test_add_exercise_form_encoded_without_date(client):
    user = create_user(client)
    before = ExerciseDate.now().to_calendar_string()
    response = client.post(ADD, data={"userId": user["_id"], "description": "run", "duration": "30"})
    after = ExerciseDate.now().to_calendar_string()

    assert response.status_code == 200
    body = response.json()
    # The request may straddle UTC midnight
    assert body.pop("date") in (before, after)
    assert body == {
        "_id": user["_id"],
        "username": "alice",
        "description": "run",
        "duration": 30,
    }


def test_add_exercise_json_with_date(client):
    user = create_user(client)
    response = client.post(ADD, json={
        "userId": user["_id"],
        "description": "swim",
        "duration": "12.5",
        "date": "2024-01-01",
    })
    assert response.json()["date"] == "Mon Jan 01 2024"
    assert response.json()["duration"] == 12.5


def test_add_exercise_soft_errors(client):
    user = create_user(client)
    cases = [
        ({"description": "run", "duration": "30"}, ErrorMessages.MISSING_REQUIRED_FIELDS),
        ({"userId": user["_id"], "description": "run", "duration": "abc"}, ErrorMessages.DURATION_NOT_A_NUMBER),
        ({"userId": str(uuid.uuid4()), "description": "run", "duration": "30"}, ErrorMessages.USER_NOT_FOUND),
        ({"userId": user["_id"], "description": "run", "duration": "30", "date": "someday"},
         ErrorMessages.INVALID_DATE_FORMAT),
    ]
    for payload, message in cases:
        response = client.post(ADD, data=payload)
        assert response.status_code == 200
        assert response.json() == {"error": message}

    log = client.get(LOG, params={"userId": user["_id"]}).json()
    assert log["count"] == 0


def test_users_listing_is_idempotent(client):
    alice = create_user(client, "alice")
    bob = create_user(client, "bob")

    first = client.get(USERS)
    second = client.get(USERS)

    assert first.status_code == 200
    assert first.json() == second.json()
    assert first.json() == [
        {"_id": alice["_id"], "username": "alice"},
        {"_id": bob["_id"], "username": "bob"},
    ]


def test_log_with_limit_and_bounds(client):
    user = create_user(client)
    for day in ("01", "10", "20"):
        client.post(ADD, json={
            "userId": user["_id"],
            "description": f"day {day}",
            "duration": 20,
            "date": f"2024-01-{day}",
        })

    full = client.get(LOG, params={"userId": user["_id"]}).json()
    assert full["_id"] == user["_id"]
    assert full["username"] == "alice"
    assert full["count"] == 3
    assert {"description": "day 01", "duration": 20, "date": "2024-01-01T00:00:00.000Z"} in full["log"]

    limited = client.get(LOG, params={"userId": user["_id"], "limit": 2}).json()
    assert limited["count"] == 2
    assert len(limited["log"]) == 2

    after = client.get(LOG, params={"userId": user["_id"], "from": "2024-01-10"}).json()
    assert [line["description"] for line in after["log"]] == ["day 20"]

    # 'to' alone is not applied
    upper_only = client.get(LOG, params={"userId": user["_id"], "to": "2024-01-05"}).json()
    assert upper_only["count"] == 3


def test_log_upper_bound_alone_when_configured(make_client):
    client = make_client(upper_bound_requires_from=False)
    user = create_user(client)
    for day in ("01", "10"):
        client.post(ADD, json={"userId": user["_id"], "description": day, "duration": 5, "date": f"2024-01-{day}"})

    body = client.get(LOG, params={"userId": user["_id"], "to": "2024-01-05"}).json()
    assert [line["description"] for line in body["log"]] == ["01"]


def test_log_soft_errors(client):
    assert client.get(LOG).json() == {"error": ErrorMessages.MISSING_USER_ID}
    assert client.get(LOG, params={"userId": "x", "from": "bad"}).json() == {
        "error": ErrorMessages.INVALID_DATE_FORMAT
    }
    assert client.get(LOG, params={"userId": "x", "limit": "bad"}).json() == {
        "error": ErrorMessages.LIMIT_NOT_A_NUMBER
    }
    response = client.get(LOG, params={"userId": "x"})
    assert response.status_code == 200
    assert response.json() == {"error": ErrorMessages.USER_NOT_FOUND}


def test_log_with_huge_limit_returns_everything(client):
    user = create_user(client)
    client.post(ADD, json={"userId": user["_id"], "description": "run", "duration": 10, "date": "2024-01-01"})

    response = client.get(LOG, params={"userId": user["_id"], "limit": "1e30"})
    assert response.status_code == 200
    assert response.json()["count"] == 1


def test_dates_out_of_range_after_offset_are_soft_errors(client):
    user = create_user(client)
    edge = "0001-01-01T00:00:00+01:00"

    response = client.get(LOG, params={"userId": user["_id"], "from": edge})
    assert response.status_code == 200
    assert response.json() == {"error": ErrorMessages.INVALID_DATE_FORMAT}

    response = client.post(ADD, data={"userId": user["_id"], "description": "run", "duration": "5", "date": edge})
    assert response.status_code == 200
    assert response.json() == {"error": ErrorMessages.INVALID_DATE_FORMAT}
