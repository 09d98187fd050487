"""HTTP contract of the chat routes: guard, bodies and status codes."""

from chattask.domain.value_objects.system_role import SystemRole

NIL_CHAT = "00000000-0000-4000-8000-0000000000aa"


def _headers(user_id):
    return {"X-User-ID": user_id.value}


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}
    assert client.get("/").status_code == 200


def test_correlation_id_is_echoed(client):
    res = client.get("/health", headers={"X-Correlation-ID": "abc-123"})
    assert res.headers["X-Correlation-ID"] == "abc-123"


class TestCreateChat:
    def test_created(self, client, env):
        owner, member = env.new_user("owner"), env.new_user("member")

        res = client.post(
            "/chats",
            json={"name": "team", "ownerID": owner.value, "userIDs": [member.value]},
        )

        assert res.status_code == 201, res.text
        chat_id = res.json()["chat_id"]
        assert chat_id in env.store.chats
        assert len(env.publisher.published) == 1

    def test_missing_system_role(self, client, env):
        owner = env.new_user("owner")
        del env.store.roles[env.store.role_by_name("owner").id]

        res = client.post("/chats", json={"name": "team", "ownerID": owner.value})

        assert res.status_code == 400
        assert res.json() == {"error": "invalid credentials"}

    def test_unknown_user(self, client, env):
        res = client.post("/chats", json={"name": "team", "ownerID": NIL_CHAT})
        assert res.status_code == 502

    def test_unknown_avatar(self, client, env):
        owner = env.new_user("owner")
        res = client.post("/chats", json={"name": "team", "ownerID": owner.value, "avatarFileID": 77})
        assert res.status_code == 404

    def test_invalid_body(self, client):
        res = client.post("/chats", json={"name": "team", "ownerID": "not-a-uuid"})
        assert res.status_code == 400
        assert res.json()["error"] == "Validation error"


class TestPermissionGuard:
    def test_missing_user_header(self, client, env):
        owner = env.new_user("owner")
        chat_id = env.add_chat("team", owner)

        res = client.put(f"/chats/{chat_id.value}", json={"name": "x"})

        assert res.status_code == 400
        assert res.json() == {"error": "Invalid User ID"}

    def test_invalid_chat_id(self, client, env):
        owner = env.new_user("owner")
        res = client.put("/chats/not-a-uuid", json={"name": "x"}, headers=_headers(owner))
        assert res.status_code == 400
        assert res.json() == {"error": "Invalid Chat ID"}

    def test_non_member(self, client, env):
        owner, stranger = env.new_user("owner"), env.new_user("stranger")
        chat_id = env.add_chat("team", owner)

        res = client.put(f"/chats/{chat_id.value}", json={"name": "x"}, headers=_headers(stranger))

        assert res.status_code == 403
        assert res.json() == {"error": "Could not verify permission"}

    def test_insufficient_permission(self, client, env):
        owner, member = env.new_user("owner"), env.new_user("member")
        chat_id = env.add_chat("team", owner, [member])

        res = client.put(f"/chats/{chat_id.value}", json={"name": "x"}, headers=_headers(member))

        assert res.status_code == 403
        assert res.json() == {"error": "Forbidden: insufficient permissions"}
        assert env.store.chats[chat_id.value].name == "team"


class TestEditChat:
    def test_update_members(self, client, env):
        owner, old, new = env.new_user("owner"), env.new_user("old"), env.new_user("new")
        chat_id = env.add_chat("team", owner, [old])

        res = client.put(
            f"/chats/{chat_id.value}",
            json={"name": "renamed", "addUserIDs": [new.value], "removeUserIDs": [old.value]},
            headers=_headers(owner),
        )

        assert res.status_code == 200, res.text
        body = res.json()
        assert body["chat"]["name"] == "renamed"
        assert body["updateUsers"] == [
            {"userID": new.value, "state": "created"},
            {"userID": old.value, "state": "deleted"},
        ]

    def test_blank_name(self, client, env):
        owner = env.new_user("owner")
        chat_id = env.add_chat("team", owner)

        res = client.put(f"/chats/{chat_id.value}", json={"name": "   "}, headers=_headers(owner))

        assert res.status_code == 400

    def test_delete_chat(self, client, env):
        owner = env.new_user("owner")
        chat_id = env.add_chat("team", owner)

        res = client.delete(f"/chats/{chat_id.value}", headers=_headers(owner))

        assert res.status_code == 204
        assert chat_id.value not in env.store.chats


class TestRoles:
    def test_change_role(self, client, env):
        owner, member = env.new_user("owner"), env.new_user("member")
        chat_id = env.add_chat("team", owner, [member])
        owner_role = env.store.role_by_name("owner")

        res = client.patch(
            f"/chats/{chat_id.value}/roles/change",
            json={"user_id": member.value, "role_id": owner_role.id},
            headers=_headers(owner),
        )

        assert res.status_code == 200
        assert env.role_of(chat_id, member) == "owner"

    def test_change_to_unknown_role(self, client, env):
        owner, member = env.new_user("owner"), env.new_user("member")
        chat_id = env.add_chat("team", owner, [member])

        res = client.patch(
            f"/chats/{chat_id.value}/roles/change",
            json={"user_id": member.value, "role_id": 9999},
            headers=_headers(owner),
        )

        assert res.status_code == 500
        assert env.role_of(chat_id, member) == "main"

    def test_ban_then_send_is_forbidden(self, client, env):
        owner, member = env.new_user("owner"), env.new_user("member")
        chat_id = env.add_chat("team", owner, [member])

        res = client.post(f"/chats/{chat_id.value}/ban/{member.value}", headers=_headers(owner))
        assert res.status_code == 200

        res = client.post(
            f"/chats/messages/{chat_id.value}", json={"content": "hi"}, headers=_headers(member)
        )
        assert res.status_code == 403

    def test_ban_non_member(self, client, env):
        owner, stranger = env.new_user("owner"), env.new_user("stranger")
        chat_id = env.add_chat("team", owner)

        res = client.post(f"/chats/{chat_id.value}/ban/{stranger.value}", headers=_headers(owner))

        assert res.status_code == 500

    def test_member_cannot_ban(self, client, env):
        owner, member = env.new_user("owner"), env.new_user("member")
        chat_id = env.add_chat("team", owner, [member])

        res = client.post(f"/chats/{chat_id.value}/ban/{owner.value}", headers=_headers(member))

        assert res.status_code == 403
        assert env.role_of(chat_id, owner) == SystemRole.OWNER.value

    def test_user_role(self, client, env):
        owner, member = env.new_user("owner"), env.new_user("member")
        chat_id = env.add_chat("team", owner, [member])

        res = client.get(f"/chats/{chat_id.value}/user-roles/{owner.value}", headers=_headers(member))

        assert res.status_code == 200
        assert res.json() == {"roleName": "owner"}

    def test_user_role_requester_not_member(self, client, env):
        owner, stranger = env.new_user("owner"), env.new_user("stranger")
        chat_id = env.add_chat("team", owner)

        res = client.get(f"/chats/{chat_id.value}/user-roles/{owner.value}", headers=_headers(stranger))

        assert res.status_code == 403

    def test_my_role(self, client, env):
        owner, member = env.new_user("owner"), env.new_user("member")
        chat_id = env.add_chat("team", owner, [member])

        res = client.get(f"/chats/{chat_id.value}/me/role", headers=_headers(member))

        assert res.status_code == 200
        body = res.json()
        assert body["roleName"] == "main"
        assert {p["name"] for p in body["permissions"]} == {"send_message", "view_messages"}


class TestChatReads:
    def test_get_chat(self, client, env):
        owner = env.new_user("owner")
        chat_id = env.add_chat("team", owner, description="d")

        res = client.get(f"/chats/{chat_id.value}")

        assert res.status_code == 200
        body = res.json()
        assert body["name"] == "team"
        assert body["isGroup"] is False
        assert body["description"] == "d"

    def test_get_unknown_chat(self, client):
        assert client.get(f"/chats/{NIL_CHAT}").status_code == 404

    def test_list_user_chats_and_members(self, client, env):
        owner, member = env.new_user("owner"), env.new_user("member")
        chat_id = env.add_chat("team", owner, [member])

        chats = client.get(f"/chats/user/{member.value}").json()
        members = client.get(f"/chats/{chat_id.value}/members").json()

        assert [c["id"] for c in chats] == [chat_id.value]
        assert {m["roleName"] for m in members} == {"owner", "main"}
