"""HTTP contract of the task, task status and role admin routes."""

NIL_UUID = "00000000-0000-0000-0000-000000000000"


class TestCreateTask:
    def test_created(self, client, env):
        creator, executor = env.new_user("carol"), env.new_user("eve")

        res = client.post(
            "/tasks",
            json={
                "title": "Ship",
                "description": "v2",
                "creator_id": creator.value,
                "executor_id": executor.value,
            },
        )

        assert res.status_code == 201, res.text
        body = res.json()
        assert body["title"] == "Ship"
        assert body["status"]["name"] == "created"
        assert body["executor_id"] == executor.value
        assert len(env.publisher.published) == 1

    def test_nil_ids_mean_absent(self, client, env):
        creator = env.new_user("carol")

        res = client.post(
            "/tasks",
            json={"title": "Solo", "creator_id": creator.value, "executor_id": NIL_UUID, "chat_id": NIL_UUID},
        )

        assert res.status_code == 201, res.text
        assert res.json()["executor_id"] is None
        assert res.json()["chat_id"] is None

    def test_unknown_chat_is_bad_gateway(self, client, env):
        creator = env.new_user("carol")

        res = client.post(
            "/tasks",
            json={"title": "T", "creator_id": creator.value, "chat_id": "3f1e5c2a-8b7d-4c6e-9f0a-1b2c3d4e5f60"},
        )

        assert res.status_code == 502

    def test_unknown_file(self, client, env):
        creator = env.new_user("carol")

        res = client.post("/tasks", json={"title": "T", "creator_id": creator.value, "file_ids": [3]})

        assert res.status_code == 404

    def test_missing_created_status(self, client, env):
        creator = env.new_user("carol")
        del env.store.statuses[env.store.status_by_name("created").id]

        res = client.post("/tasks", json={"title": "T", "creator_id": creator.value})

        assert res.status_code == 400


class TestTaskLifecycle:
    def _create(self, client, env, executor):
        creator = env.new_user("carol")
        res = client.post(
            "/tasks", json={"title": "T", "creator_id": creator.value, "executor_id": executor.value}
        )
        return res.json()["id"]

    def test_status_change_and_reads(self, client, env):
        executor = env.new_user("eve")
        task_id = self._create(client, env, executor)
        done = env.store.status_by_name("done")

        res = client.patch(f"/tasks/{task_id}/status/{done.id}")
        assert res.status_code == 200

        task = client.get(f"/tasks/{task_id}").json()
        assert task["task"]["status_id"] == done.id

        listing = client.get(f"/users/{executor.value}/tasks").json()
        assert listing == [
            {"id": task_id, "title": "T", "status": "done", "createdAt": listing[0]["createdAt"]}
        ]

    def test_unknown_status(self, client, env):
        task_id = self._create(client, env, env.new_user("eve"))
        assert client.patch(f"/tasks/{task_id}/status/999").status_code == 400

    def test_unknown_task(self, client):
        assert client.get("/tasks/999").status_code == 404


class TestTaskStatuses:
    def test_crud(self, client):
        res = client.post("/tasks/statuses", json={"name": "review"})
        assert res.status_code == 201
        status_id = res.json()["id"]

        assert "review" in [s["name"] for s in client.get("/tasks/statuses").json()]
        assert client.get(f"/tasks/statuses/{status_id}").json() == {"id": status_id, "name": "review"}
        assert client.delete(f"/tasks/statuses/{status_id}").status_code == 204
        assert client.get(f"/tasks/statuses/{status_id}").status_code == 404

    def test_duplicate(self, client):
        assert client.post("/tasks/statuses", json={"name": "done"}).status_code == 400


class TestRoleAdmin:
    def test_create_role_and_conflict(self, client, env):
        [view_id] = [p.id for p in env.store.permissions.values() if p.name == "view_messages"]

        res = client.post("/chat-roles", json={"name": "reader", "permissionIds": [view_id]})
        assert res.status_code == 201
        assert [p["name"] for p in res.json()["permissions"]] == ["view_messages"]

        assert client.post("/chat-roles", json={"name": "reader"}).status_code == 409

    def test_unknown_role(self, client):
        assert client.get("/chat-roles/999").status_code == 404
        assert client.delete("/chat-roles/999").status_code == 404

    def test_permissions(self, client):
        res = client.post("/chat-permissions", json={"name": "pin_message"})
        assert res.status_code == 201
        permission_id = res.json()["id"]

        assert client.delete(f"/chat-permissions/{permission_id}").status_code == 204
        names = [p["name"] for p in client.get("/chat-permissions").json()]
        assert "pin_message" not in names

    def test_replace_role_permissions(self, client, env):
        main = env.store.role_by_name("main")
        [ban_id] = [p.id for p in env.store.permissions.values() if p.name == "ban_user"]

        res = client.patch(f"/chat-roles/{main.id}/permissions", json={"permissionIds": [ban_id]})
        assert res.status_code == 200
        assert [p["name"] for p in res.json()["permissions"]] == ["ban_user"]

        missing = client.patch(f"/chat-roles/{main.id}/permissions", json={"permissionIds": [999]})
        assert missing.status_code == 404
