"""ChatPermissionService: membership + role permission set decide access."""

import pytest

from chattask.domain.exceptions import NotChatMemberError
from chattask.domain.value_objects.chat_id import ChatId
from chattask.domain.value_objects.permission_name import ChatPermissionName
from chattask.domain.value_objects.system_role import SystemRole
from chattask.services.chat_permission_service import ChatPermissionService
from fakes import FakeChatMemberRepository


def _service(env):
    return ChatPermissionService(FakeChatMemberRepository(env.store))


def test_owner_has_every_permission(env, run):
    owner = env.new_user("owner")
    chat_id = env.add_chat("team", owner)
    service = _service(env)

    for permission in ChatPermissionName:
        assert run(service.has_permission(owner, chat_id, permission.value)) is True


def test_main_member_can_only_send_and_view(env, run):
    owner, member = env.new_user("owner"), env.new_user("member")
    chat_id = env.add_chat("team", owner, [member])
    service = _service(env)

    granted = {
        p for p in ChatPermissionName if run(service.has_permission(member, chat_id, p.value))
    }
    assert granted == {ChatPermissionName.SEND_MESSAGE, ChatPermissionName.VIEW_MESSAGES}


def test_banned_member_has_no_permissions(env, run):
    owner, member = env.new_user("owner"), env.new_user("member")
    chat_id = env.add_chat("team", owner, [member])
    env.set_role(chat_id, member, SystemRole.BANNED)

    allowed = run(_service(env).has_permission(member, chat_id, "send_message"))

    assert allowed is False


def test_non_member_raises(env, run):
    owner, stranger = env.new_user("owner"), env.new_user("stranger")
    chat_id = env.add_chat("team", owner)

    with pytest.raises(NotChatMemberError):
        run(_service(env).has_permission(stranger, chat_id, "view_messages"))


def test_unknown_chat_raises(env, run):
    user = env.new_user("someone")
    missing = ChatId("00000000-0000-4000-8000-000000000001")

    with pytest.raises(NotChatMemberError):
        run(_service(env).has_permission(user, missing, "view_messages"))


def test_role_change_is_seen_on_next_check(env, run):
    owner, member = env.new_user("owner"), env.new_user("member")
    chat_id = env.add_chat("team", owner, [member])
    service = _service(env)

    assert run(service.has_permission(member, chat_id, "edit_chat")) is False
    env.set_role(chat_id, member, SystemRole.OWNER)
    assert run(service.has_permission(member, chat_id, "edit_chat")) is True
