import pytest
from datetime import date
from unittest.mock import AsyncMock

from diary_api import schemas
from diary_api.api_v1.deps import get_progress_service
from diary_api.exceptions import StorageError


@pytest.fixture
def repository(repository):
    repository.activities = [
        schemas.ActivityEntry(date="2024-03-01", type="Walk", elapsedTime=1800),
        schemas.ActivityEntry(date="2024-03-01", type="Yoga", elapsedTime=600),
    ]
    repository.junk_foods = [schemas.JunkFoodEntry(date="2024-03-02", type="Chips")]
    return repository


def test_read_progress_success(client):
    response = client.get("/api/v1/progress/2024-03-01/2024-03-02")

    assert response.status_code == 200
    assert response.json() == {
        "2024-03-01": {
            "walks": [{"type": "Walk", "elapsedTime": 1800}],
            "workouts": [{"type": "Yoga", "elapsedTime": 600}],
            "junkFoods": [],
        },
        "2024-03-02": {
            "walks": [],
            "workouts": [],
            "junkFoods": [{"type": "Chips"}],
        },
    }


def test_read_progress_fills_days_without_entries(client):
    response = client.get("/api/v1/progress/2024-04-01/2024-04-03")

    assert response.status_code == 200
    data = response.json()
    assert sorted(data) == ["2024-04-01", "2024-04-02", "2024-04-03"]
    assert all(day == {"walks": [], "workouts": [], "junkFoods": []} for day in data.values())


def test_read_progress_single_day(client):
    response = client.get("/api/v1/progress/2024-03-02/2024-03-02")
    assert response.status_code == 200
    assert list(response.json()) == ["2024-03-02"]


@pytest.mark.parametrize("path,detail", [
    ("/api/v1/progress/2024-3-01/2024-03-02", "Invalid start date. Please use YYYY-MM-DD."),
    ("/api/v1/progress/2024-03-01/tomorrow", "Invalid end date. Please use YYYY-MM-DD."),
    ("/api/v1/progress/2024-02-30/2024-03-02", "Invalid start date. Please use YYYY-MM-DD."),
    ("/api/v1/progress/2024-03-02/2024-03-01", "End date must not be before start date."),
])
def test_read_progress_bad_request(client, repository, path, detail):
    response = client.get(path)

    assert response.status_code == 400
    assert response.json() == {"detail": detail}
    assert repository.calls == []


def test_read_progress_storage_error_is_not_leaked(client, repository):
    repository.error = StorageError("connection refused by db-host-7")

    response = client.get("/api/v1/progress/2024-03-01/2024-03-02")

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal Server Error"}
    assert "db-host-7" not in response.text


def test_inverted_range_never_reaches_service(app, client):
    service = AsyncMock()
    app.dependency_overrides[get_progress_service] = lambda: service

    response = client.get("/api/v1/progress/2024-03-05/2024-03-01")

    assert response.status_code == 400
    service.compute_progress.assert_not_called()


def test_service_receives_parsed_dates(app, client):
    service = AsyncMock()
    service.compute_progress.return_value = {"2024-03-01": schemas.DailyProgress()}
    app.dependency_overrides[get_progress_service] = lambda: service

    response = client.get("/api/v1/progress/2024-03-01/2024-03-01")

    assert response.status_code == 200
    service.compute_progress.assert_awaited_once_with(date(2024, 3, 1), date(2024, 3, 1))


@pytest.mark.parametrize("path", [
    "/api/v1/progress/2024-03-01",
    "/api/v1/progress/2024-03-01/2024-03-02/extra",
])
def test_read_progress_wrong_segment_count_is_not_found(client, path):
    assert client.get(path).status_code == 404


def test_read_progress_rejects_other_methods(client):
    assert client.post("/api/v1/progress/2024-03-01/2024-03-02").status_code == 405
