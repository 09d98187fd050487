"""SendMessage, GetChatMessages and SearchMessages handlers."""

import pytest

from chattask.application.commands.messages import SendMessageCommand, SendMessageHandler
from chattask.application.queries.messages import (
    GetChatMessagesHandler,
    GetChatMessagesQuery,
    SearchMessagesHandler,
    SearchMessagesQuery,
)
from chattask.domain.exceptions import (
    ChatNotFoundError,
    EmptyQueryError,
    FileReferenceNotFoundError,
    FileServiceError,
    InvalidCredentialsError,
    NotChatMemberError,
    UserServiceError,
)
from chattask.domain.value_objects.chat_id import ChatId
from chattask.domain.value_objects.user_id import UserId
from fakes import (
    FakeChatMemberRepository,
    FakeChatRepository,
    FakeMessageRepository,
    FakeUnitOfWork,
)

MISSING_CHAT = ChatId("00000000-0000-4000-8000-0000000000aa")


def send_handler(env):
    return SendMessageHandler(
        chat_repository=FakeChatRepository(env.store),
        message_repository=FakeMessageRepository(env.store),
        user_gateway=env.users,
        file_gateway=env.files,
        unit_of_work=FakeUnitOfWork(env.store),
    )


def list_handler(env):
    return GetChatMessagesHandler(
        FakeChatRepository(env.store), FakeMessageRepository(env.store), env.files
    )


def search_handler(env):
    return SearchMessagesHandler(
        FakeChatRepository(env.store),
        FakeChatMemberRepository(env.store),
        FakeMessageRepository(env.store),
    )


class TestSendMessage:
    def test_message_with_files(self, env, run):
        owner = env.new_user("owner")
        chat_id = env.add_chat("team", owner)
        env.files.register(3, "a.txt")
        env.files.register(4, "b.txt")

        result = run(send_handler(env).execute(
            SendMessageCommand(sender_id=owner, chat_id=chat_id, content="hi", file_ids=(3, 4))
        ))

        assert result.message.content == "hi"
        assert result.message.file_ids == [3, 4]
        assert [f.name for f in result.files] == ["a.txt", "b.txt"]
        assert len(env.store.messages) == 1

    def test_unknown_file_creates_no_message(self, env, run):
        owner = env.new_user("owner")
        chat_id = env.add_chat("team", owner)
        env.files.register(3)

        with pytest.raises(FileReferenceNotFoundError):
            run(send_handler(env).execute(
                SendMessageCommand(sender_id=owner, chat_id=chat_id, content="hi", file_ids=(3, 0))
            ))
        assert env.store.messages == []

    def test_file_service_failure(self, env, run):
        owner = env.new_user("owner")
        chat_id = env.add_chat("team", owner)
        env.files.failing.add(8)

        with pytest.raises(FileServiceError):
            run(send_handler(env).execute(
                SendMessageCommand(sender_id=owner, chat_id=chat_id, content="hi", file_ids=(8,))
            ))
        assert env.store.messages == []

    def test_unknown_chat(self, env, run):
        owner = env.new_user("owner")

        with pytest.raises(InvalidCredentialsError):
            run(send_handler(env).execute(
                SendMessageCommand(sender_id=owner, chat_id=MISSING_CHAT, content="hi")
            ))

    def test_unknown_sender(self, env, run):
        owner = env.new_user("owner")
        chat_id = env.add_chat("team", owner)
        ghost = UserId("00000000-0000-4000-8000-0000000000bb")

        with pytest.raises(UserServiceError):
            run(send_handler(env).execute(
                SendMessageCommand(sender_id=ghost, chat_id=chat_id, content="hi")
            ))


class TestGetChatMessages:
    def test_newest_first_with_paging(self, env, run):
        owner = env.new_user("owner")
        chat_id = env.add_chat("team", owner)
        for i in range(5):
            env.add_message(chat_id, owner, f"m{i}")

        page = run(list_handler(env).execute(GetChatMessagesQuery(chat_id=chat_id, offset=1, limit=2)))

        assert [item.message.content for item in page] == ["m3", "m2"]

    def test_files_are_resolved(self, env, run):
        owner = env.new_user("owner")
        chat_id = env.add_chat("team", owner)
        env.files.register(9, "doc.pdf")
        env.add_message(chat_id, owner, "see attached", file_ids=[9])

        [item] = run(list_handler(env).execute(GetChatMessagesQuery(chat_id=chat_id)))

        assert [f.name for f in item.files] == ["doc.pdf"]

    def test_file_failure_aborts_listing(self, env, run):
        owner = env.new_user("owner")
        chat_id = env.add_chat("team", owner)
        env.files.failing.add(9)
        env.add_message(chat_id, owner, "see attached", file_ids=[9])

        with pytest.raises(FileServiceError):
            run(list_handler(env).execute(GetChatMessagesQuery(chat_id=chat_id)))

    def test_unknown_chat(self, env, run):
        with pytest.raises(ChatNotFoundError):
            run(list_handler(env).execute(GetChatMessagesQuery(chat_id=MISSING_CHAT)))


class TestSearchMessages:
    def test_case_insensitive_with_total(self, env, run):
        owner = env.new_user("owner")
        chat_id = env.add_chat("team", owner)
        for text in ["Deploy today", "lunch?", "deploy failed", "DEPLOY again"]:
            env.add_message(chat_id, owner, text)

        result = run(search_handler(env).execute(
            SearchMessagesQuery(user_id=owner, chat_id=chat_id, text="deploy", limit=2, offset=0)
        ))

        assert result.total == 3
        assert [m.content for m in result.messages] == ["DEPLOY again", "deploy failed"]

    def test_offset_past_matches(self, env, run):
        owner = env.new_user("owner")
        chat_id = env.add_chat("team", owner)
        env.add_message(chat_id, owner, "deploy")

        result = run(search_handler(env).execute(
            SearchMessagesQuery(user_id=owner, chat_id=chat_id, text="deploy", offset=5)
        ))

        assert result.messages == []
        assert result.total == 1

    def test_empty_query_is_checked_first(self, env, run):
        stranger = env.new_user("stranger")

        with pytest.raises(EmptyQueryError):
            run(search_handler(env).execute(
                SearchMessagesQuery(user_id=stranger, chat_id=MISSING_CHAT, text="")
            ))

    def test_unknown_chat(self, env, run):
        owner = env.new_user("owner")

        with pytest.raises(ChatNotFoundError):
            run(search_handler(env).execute(
                SearchMessagesQuery(user_id=owner, chat_id=MISSING_CHAT, text="x")
            ))

    def test_non_member(self, env, run):
        owner, stranger = env.new_user("owner"), env.new_user("stranger")
        chat_id = env.add_chat("team", owner)

        with pytest.raises(NotChatMemberError):
            run(search_handler(env).execute(
                SearchMessagesQuery(user_id=stranger, chat_id=chat_id, text="x")
            ))


def test_whitespace_query_is_searched_literally(env, run):
    owner = env.new_user("owner")
    chat_id = env.add_chat("team", owner)
    for text in ["ship it", "shipit"]:
        env.add_message(chat_id, owner, text)

    result = run(search_handler(env).execute(
        SearchMessagesQuery(user_id=owner, chat_id=chat_id, text=" ")
    ))

    assert result.total == 1
    assert [m.content for m in result.messages] == ["ship it"]
