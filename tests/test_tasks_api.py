def test_health_check(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_list_returns_all_tasks(client, sample_tasks):
    response = client.get("/api/tasks")

    assert response.status_code == 200
    assert len(response.json()) == 3


def test_list_defaults_to_newest_first(client, sample_tasks):
    response = client.get("/api/tasks")

    assert [t["title"] for t in response.json()] == ["Test Task 3", "Test Task 2", "Test Task 1"]


def test_list_sorts_by_due_date_ascending_with_missing_dates_first(client, sample_tasks):
    response = client.get("/api/tasks", params={"sortBy": "due_date", "order": "ASC"})

    assert response.status_code == 200
    body = response.json()
    assert [t["due_date"] for t in body] == [None, "2025-12-25", "2025-12-30"]
    assert body[0]["title"] == "Test Task 3"


def test_list_sorts_by_completed_descending(client, sample_tasks):
    response = client.get("/api/tasks", params={"sortBy": "completed", "order": "DESC"})

    assert response.status_code == 200
    assert response.json()[0]["completed"] is True


def test_list_accepts_lowercase_order(client, sample_tasks):
    response = client.get("/api/tasks", params={"sortBy": "sort_order", "order": "asc"})

    assert [t["sort_order"] for t in response.json()] == [0, 1, 2]


def test_list_handles_invalid_sort_parameters(client, sample_tasks):
    response = client.get("/api/tasks", params={"sortBy": "invalid", "order": "INVALID"})

    assert response.status_code == 200
    assert response.json() == client.get("/api/tasks").json()


def test_get_task(client, sample_tasks):
    task = sample_tasks[0]

    response = client.get(f"/api/tasks/{task.id}")

    assert response.status_code == 200
    assert response.json()["id"] == task.id
    assert response.json()["title"] == task.title


def test_get_missing_task(client, sample_tasks):
    response = client.get("/api/tasks/99999")

    assert response.status_code == 404
    assert response.json()["detail"] == "Task not found"


def test_get_malformed_id(client):
    response = client.get("/api/tasks/invalid")

    assert response.status_code == 400
    assert response.json()["detail"] == "Valid task ID is required"


def test_create_task_with_all_fields(client):
    response = client.post(
        "/api/tasks",
        json={
            "title": "New Task",
            "description": "New Description",
            "due_date": "2025-12-31",
            "completed": False,
        },
    )

    assert response.status_code == 201
    body = response.json()
    assert body["title"] == "New Task"
    assert body["description"] == "New Description"
    assert body["due_date"] == "2025-12-31"
    assert body["completed"] is False
    assert body["sort_order"] == 1
    assert body["id"] is not None


def test_create_task_with_only_title(client):
    response = client.post("/api/tasks", json={"title": "Minimal Task"})

    assert response.status_code == 201
    assert response.json()["description"] == ""


def test_create_task_sorts_last(client, sample_tasks):
    response = client.post("/api/tasks", json={"title": "Last"})

    assert response.json()["sort_order"] == 3
    listed = client.get("/api/tasks", params={"sortBy": "sort_order", "order": "ASC"}).json()
    assert listed[-1]["id"] == response.json()["id"]


def test_create_task_trims_title(client):
    response = client.post("/api/tasks", json={"title": "  Trimmed Task  "})

    assert response.status_code == 201
    assert response.json()["title"] == "Trimmed Task"


def test_create_task_without_title(client):
    response = client.post("/api/tasks", json={"description": "No title"})

    assert response.status_code == 400
    assert response.json()["detail"] == "Task title is required"


def test_create_task_with_blank_title(client):
    response = client.post("/api/tasks", json={"title": "   "})

    assert response.status_code == 400
    assert response.json()["detail"] == "Task title is required"


def test_create_task_with_bad_due_date(client):
    response = client.post("/api/tasks", json={"title": "Dated", "due_date": "not-a-date"})

    assert response.status_code == 400
    assert response.json()["detail"].startswith("due_date")


def test_update_all_fields(client, sample_tasks):
    response = client.put(
        f"/api/tasks/{sample_tasks[0].id}",
        json={
            "title": "Updated Title",
            "description": "Updated Description",
            "due_date": "2026-01-01",
            "completed": True,
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert body["title"] == "Updated Title"
    assert body["description"] == "Updated Description"
    assert body["due_date"] == "2026-01-01"
    assert body["completed"] is True


def test_update_partial_fields(client, sample_tasks):
    task = sample_tasks[0]

    response = client.put(f"/api/tasks/{task.id}", json={"title": "Only Title Updated"})

    assert response.status_code == 200
    assert response.json()["title"] == "Only Title Updated"
    assert response.json()["description"] == task.description


def test_update_missing_task(client, sample_tasks):
    response = client.put("/api/tasks/99999", json={"title": "Updated"})

    assert response.status_code == 404
    assert response.json()["detail"] == "Task not found"


def test_update_with_empty_title(client, sample_tasks):
    response = client.put(f"/api/tasks/{sample_tasks[0].id}", json={"title": ""})

    assert response.status_code == 400
    assert response.json()["detail"] == "Task title cannot be empty"
    assert client.get(f"/api/tasks/{sample_tasks[0].id}").json()["title"] == "Test Task 1"


def test_update_malformed_id(client):
    response = client.put("/api/tasks/invalid", json={"title": "Updated"})

    assert response.status_code == 400
    assert response.json()["detail"] == "Valid task ID is required"


def test_toggle_incomplete_to_complete(client, sample_tasks):
    response = client.patch(f"/api/tasks/{sample_tasks[0].id}/toggle")

    assert response.status_code == 200
    assert response.json()["completed"] is True


def test_toggle_complete_to_incomplete(client, sample_tasks):
    response = client.patch(f"/api/tasks/{sample_tasks[1].id}/toggle")

    assert response.status_code == 200
    assert response.json()["completed"] is False


def test_toggle_missing_task(client):
    response = client.patch("/api/tasks/99999/toggle")

    assert response.status_code == 404
    assert response.json()["detail"] == "Task not found"


def test_toggle_malformed_id(client):
    response = client.patch("/api/tasks/invalid/toggle")

    assert response.status_code == 400
    assert response.json()["detail"] == "Valid task ID is required"


def test_delete_task(client, sample_tasks):
    task_id = sample_tasks[0].id

    response = client.delete(f"/api/tasks/{task_id}")

    assert response.status_code == 200
    assert response.json() == {"message": "Task deleted successfully", "id": task_id}
    assert client.get(f"/api/tasks/{task_id}").status_code == 404


def test_delete_missing_task(client):
    response = client.delete("/api/tasks/99999")

    assert response.status_code == 404
    assert response.json()["detail"] == "Task not found"


def test_delete_malformed_id(client):
    response = client.delete("/api/tasks/invalid")

    assert response.status_code == 400
    assert response.json()["detail"] == "Valid task ID is required"


def test_reorder_tasks(client, sample_tasks):
    a, b, c = (task.id for task in sample_tasks)

    response = client.put(
        "/api/tasks/reorder",
        json={
            "tasks": [
                {"id": a, "sort_order": 2},
                {"id": b, "sort_order": 0},
                {"id": c, "sort_order": 1},
            ]
        },
    )

    assert response.status_code == 200
    assert response.json() == {"message": "Tasks reordered successfully", "updated": 3}
    listed = client.get("/api/tasks", params={"sortBy": "sort_order", "order": "ASC"}).json()
    assert [t["id"] for t in listed] == [b, c, a]


def test_reorder_without_tasks_array(client, sample_tasks):
    response = client.put("/api/tasks/reorder", json={})

    assert response.status_code == 400
    assert response.json()["detail"] == "Tasks array is required"


def test_reorder_with_empty_tasks_array(client, sample_tasks):
    response = client.put("/api/tasks/reorder", json={"tasks": []})

    assert response.status_code == 400
    assert response.json()["detail"] == "Tasks array is required"
    listed = client.get("/api/tasks", params={"sortBy": "sort_order", "order": "ASC"}).json()
    assert [t["sort_order"] for t in listed] == [0, 1, 2]


def test_ids_beyond_the_integer_column_are_malformed(client, sample_tasks):
    too_big = "99999999999999999999"

    responses = [
        client.get(f"/api/tasks/{too_big}"),
        client.put(f"/api/tasks/{too_big}", json={"title": "Updated"}),
        client.patch(f"/api/tasks/{too_big}/toggle"),
        client.delete(f"/api/tasks/{too_big}"),
    ]

    for response in responses:
        assert response.status_code == 400
        assert response.json()["detail"] == "Valid task ID is required"


def test_reorder_rejects_sort_order_beyond_the_integer_column(client, sample_tasks):
    response = client.put(
        "/api/tasks/reorder",
        json={"tasks": [{"id": sample_tasks[0].id, "sort_order": 10**20}]},
    )

    assert response.status_code == 400
    assert response.json()["detail"].startswith("tasks.0.sort_order")
    listed = client.get("/api/tasks", params={"sortBy": "sort_order", "order": "ASC"}).json()
    assert [t["sort_order"] for t in listed] == [0, 1, 2]


def test_reorder_rejects_id_beyond_the_integer_column(client, sample_tasks):
    response = client.put(
        "/api/tasks/reorder",
        json={"tasks": [{"id": 2**63, "sort_order": 1}]},
    )

    assert response.status_code == 400
    assert response.json()["detail"].startswith("tasks.0.id")


def test_update_missing_task_with_blank_title_is_not_found(client, sample_tasks):
    response = client.put("/api/tasks/99999", json={"title": ""})

    assert response.status_code == 404
    assert response.json()["detail"] == "Task not found"


def test_update_with_non_object_body(client, sample_tasks):
    response = client.put(f"/api/tasks/{sample_tasks[0].id}", json=["title"])

    assert response.status_code == 400


def test_update_without_body_only_refreshes_updated_at(client, sample_tasks):
    task = sample_tasks[2]

    response = client.put(f"/api/tasks/{task.id}")

    assert response.status_code == 200
    assert response.json()["title"] == "Test Task 3"
    assert response.json()["updated_at"] > task.updated_at.isoformat()


def test_reorder_counts_repeated_ids_once(client, sample_tasks):
    task_id = sample_tasks[0].id

    response = client.put(
        "/api/tasks/reorder",
        json={"tasks": [{"id": task_id, "sort_order": 5}, {"id": task_id, "sort_order": 9}]},
    )

    assert response.json()["updated"] == 1
    assert client.get(f"/api/tasks/{task_id}").json()["sort_order"] == 9
