from sqlalchemy import text

from aham.routines.models import RoutineTemplate, RoutineTemplateTask


def _create_template(client, name="Morning", tasks=("Stretch", "Hydrate")):
    res = client.post("/routine-templates", json={"name": name, "tasks": list(tasks)})
    assert res.status_code == 200
    return res.json()["id"]


def test_templates_list_nested_tasks(client):
    template_id = _create_template(client)
    _create_template(client, name="Evening", tasks=[])

    templates = client.get("/routine-templates").json()
    assert [t["name"] for t in templates] == ["Morning", "Evening"]
    morning = templates[0]
    assert morning["id"] == template_id
    assert [t["title"] for t in morning["tasks"]] == ["Stretch", "Hydrate"]
    assert all(t["template_id"] == template_id for t in morning["tasks"])
    assert templates[1]["tasks"] == []


def test_duplicate_template_name_fails_without_partial_rows(client, session_factory):
    _create_template(client)

    res = client.post("/routine-templates", json={"name": "Morning", "tasks": ["Extra"]})
    assert res.status_code == 500

    with session_factory() as db:
        assert db.query(RoutineTemplate).count() == 1
        titles = [t.title for t in db.query(RoutineTemplateTask).all()]
    assert titles == ["Stretch", "Hydrate"]


def test_apply_template_copies_tasks(client):
    template_id = _create_template(client)

    res = client.post("/apply-template", json={"date": "2024-02-02", "templateId": template_id})
    assert res.json() == {"success": True}

    tasks = client.get("/tasks/2024-02-02").json()
    assert [(t["title"], t["completed"]) for t in tasks] == [
        ("Stretch", False),
        ("Hydrate", False),
    ]


def test_apply_template_twice_duplicates_tasks(client):
    # Known behavior: no deduplication against the day's existing tasks.
    template_id = _create_template(client)
    client.post("/tasks", json={"date": "2024-02-02", "title": "Stretch"})

    for _ in range(2):
        client.post("/apply-template", json={"date": "2024-02-02", "templateId": template_id})

    titles = [t["title"] for t in client.get("/tasks/2024-02-02").json()]
    assert titles.count("Stretch") == 3
    assert titles.count("Hydrate") == 2


def test_apply_template_leaves_template_untouched(client):
    template_id = _create_template(client)
    client.post("/apply-template", json={"date": "2024-02-02", "templateId": template_id})

    task_id = client.get("/tasks/2024-02-02").json()[0]["id"]
    client.patch(f"/tasks/{task_id}", json={"completed": True})
    client.delete(f"/tasks/{task_id}")

    template = client.get("/routine-templates").json()[0]
    assert [t["title"] for t in template["tasks"]] == ["Stretch", "Hydrate"]


def test_apply_unknown_template_adds_nothing(client):
    res = client.post("/apply-template", json={"date": "2024-02-02", "templateId": 999})
    assert res.json() == {"success": True}
    assert client.get("/tasks/2024-02-02").json() == []


def test_applied_tasks_survive_template_deletion(client):
    template_id = _create_template(client)
    client.post("/apply-template", json={"date": "2024-02-02", "templateId": template_id})

    client.delete(f"/routine-templates/{template_id}")
    assert len(client.get("/tasks/2024-02-02").json()) == 2


def test_delete_template_cascades_children(client, session_factory):
    template_id = _create_template(client)
    keep_id = _create_template(client, name="Evening", tasks=["Journal"])

    assert client.delete(f"/routine-templates/{template_id}").json() == {"success": True}

    with session_factory() as db:
        assert db.query(RoutineTemplateTask).filter(
            RoutineTemplateTask.template_id == template_id
        ).count() == 0
        remaining = db.query(RoutineTemplateTask).filter(
            RoutineTemplateTask.template_id == keep_id
        ).count()
    assert remaining == 1
    assert [t["id"] for t in client.get("/routine-templates").json()] == [keep_id]


def test_database_level_cascade(client, session_factory):
    template_id = _create_template(client)

    with session_factory() as db:
        db.execute(text("DELETE FROM routine_templates WHERE id = :id"), {"id": template_id})
        db.commit()
        orphans = db.execute(
            text("SELECT COUNT(*) FROM routine_template_tasks WHERE template_id = :id"),
            {"id": template_id},
        ).scalar_one()
    assert orphans == 0


def test_delete_unknown_template_succeeds(client):
    assert client.delete("/routine-templates/31337").json() == {"success": True}
