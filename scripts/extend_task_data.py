"""
Add the tasks from extra_task_data.json to a running server via POST /api/tasks,
then put them in the order the file lists them via PUT /api/tasks/reorder.
"""

import json
from pathlib import Path

import httpx

BASE_URL = "http://localhost:8080/api/tasks"
DATA_FILE = Path(__file__).parent / "extra_task_data.json"


def main() -> None:
    tasks = json.loads(DATA_FILE.read_text())
    created_ids = []

    with httpx.Client() as client:
        for i, task in enumerate(tasks, start=1):
            resp = client.post(BASE_URL, json=task)
            resp.raise_for_status()
            created_ids.append(resp.json()["id"])
            print(f"[{i}/{len(tasks)}] Created: {task['title']}")

        if created_ids:
            assignments = [
                {"id": task_id, "sort_order": position}
                for position, task_id in enumerate(created_ids)
            ]
            resp = client.put(f"{BASE_URL}/reorder", json={"tasks": assignments})
            resp.raise_for_status()
            print(f"Reordered {resp.json()['updated']} tasks.")

    print(f"\nDone. {len(tasks)} tasks added.")


if __name__ == "__main__":
    main()
