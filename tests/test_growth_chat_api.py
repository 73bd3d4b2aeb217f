from datetime import datetime, timedelta, timezone

from sqlalchemy.orm import Session

from chat import HISTORY_LIMIT, build_transcript
from helper.fallbacks import FALLBACK_CHAT_REPLY
from models.GrowthChatDBModel import GrowthConversationDB, GrowthInsightDB, GrowthMessageDB
from repository import PersistenceError, Repository


def chat(client, **body):
    return client.post("/api/growth-chat", json={"user_id": "user-1", **body})


def test_new_conversation_stores_both_messages(client, fake_llm, rows):
    fake_llm.reply = "Start with a referral strategy and track activation."

    response = chat(client, message="How do I get my first 100 users?")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["response"] == "Start with a referral strategy and track activation."
    [conversation] = rows(GrowthConversationDB)
    assert conversation.id == body["conversation_id"]
    assert conversation.message_count == 2
    assert conversation.conversation_title == "Growth Strategy Chat"
    assert conversation.last_message_at is not None
    messages = rows(GrowthMessageDB, conversation_id=conversation.id)
    assert sorted(m.role for m in messages) == ["assistant", "user"]


def test_insights_are_returned_and_stored(client, fake_llm, rows):
    fake_llm.reply = "A content strategy plus one quick tactic: post daily."

    body = chat(client, message="Ideas?").json()

    assert [i["type"] for i in body["insights"]] == ["strategy", "tactic"]
    stored = rows(GrowthInsightDB, conversation_id=body["conversation_id"])
    assert sorted(i.insight_type for i in stored) == ["strategy", "tactic"]


def test_follow_up_turn_sees_earlier_messages(client, fake_llm, rows):
    fake_llm.reply = "Try a waitlist."
    conversation_id = chat(client, message="first question").json()["conversation_id"]
    fake_llm.reply = "Then email them weekly."

    response = chat(client, message="second question", conversation_id=conversation_id)

    assert response.status_code == 200
    assert response.json()["conversation_id"] == conversation_id
    _, prompt = fake_llm.calls[-1]
    assert "Founder: first question\n\nAlex: Try a waitlist." in prompt
    # The new message is sent once, not duplicated in the history
    assert prompt.count("second question") == 1
    [conversation] = rows(GrowthConversationDB)
    assert conversation.message_count == 4


def test_custom_title(client, fake_llm, rows):
    fake_llm.reply = "Sure."
    chat(client, message="hi", conversation_title="Launch plan")
    assert rows(GrowthConversationDB)[0].conversation_title == "Launch plan"


def test_history_is_limited_to_recent_messages(client, fake_llm, sync_engine):
    start = datetime(2025, 1, 1, tzinfo=timezone.utc)
    with Session(sync_engine) as session:
        conversation = GrowthConversationDB(user_id="user-1", conversation_title="Old", message_count=25)
        session.add(conversation)
        session.flush()
        for i in range(25):
            session.add(GrowthMessageDB(
                conversation_id=conversation.id,
                user_id="user-1",
                role="user" if i % 2 == 0 else "assistant",
                content=f"message-{i:02d}",
                created_at=start + timedelta(minutes=i),
            ))
        session.commit()
        conversation_id = conversation.id

    fake_llm.reply = "ok"
    chat(client, message="latest", conversation_id=conversation_id)

    _, prompt = fake_llm.calls[0]
    kept = [f"message-{i:02d}" for i in range(25 - HISTORY_LIMIT, 25)]
    dropped = [f"message-{i:02d}" for i in range(25 - HISTORY_LIMIT)]
    assert all(content in prompt for content in kept)
    assert not any(content in prompt for content in dropped)
    assert prompt.index("message-05") < prompt.index("message-24")


def test_completion_failure_replies_with_apology(client, fake_llm, rows):
    fake_llm.error = TimeoutError("slow model")

    response = chat(client, message="Which metric should I track?")

    assert response.status_code == 200
    body = response.json()
    assert body["response"] == FALLBACK_CHAT_REPLY
    assert body["insights"] == []
    assert rows(GrowthInsightDB) == []
    [conversation] = rows(GrowthConversationDB)
    assert conversation.message_count == 2


def test_unknown_conversation_is_404(client, fake_llm, rows):
    response = chat(client, message="hello", conversation_id="does-not-exist")
    assert response.status_code == 404
    assert response.json() == {"error": "Conversation not found"}
    assert fake_llm.calls == []
    assert rows(GrowthMessageDB) == []


def test_other_users_conversation_is_404(client, fake_llm):
    fake_llm.reply = "hi"
    conversation_id = chat(client, message="mine").json()["conversation_id"]

    response = client.post("/api/growth-chat", json={
        "user_id": "intruder", "message": "let me in", "conversation_id": conversation_id,
    })

    assert response.status_code == 404


def test_missing_message(client, fake_llm):
    response = chat(client, message="  ")
    assert response.status_code == 400
    assert response.json() == {"error": "Missing required fields"}
    assert fake_llm.calls == []


def test_insight_storage_failure_does_not_fail_turn(client, fake_llm, monkeypatch):
    async def failing_append(self, kind, parent_id, items):
        raise PersistenceError("append_child_records failed")

    monkeypatch.setattr(Repository, "append_child_records", failing_append)
    fake_llm.reply = "Pick one strategy."

    response = chat(client, message="help")

    assert response.status_code == 200
    assert response.json()["insights"][0]["type"] == "strategy"


class TestListing:
    def test_conversations_and_messages(self, client, fake_llm):
        fake_llm.reply = "Answer"
        conversation_id = chat(client, message="Question").json()["conversation_id"]

        conversations = client.get("/api/growth-conversations", params={"user_id": "user-1"}).json()["conversations"]
        assert [c["id"] for c in conversations] == [conversation_id]
        assert conversations[0]["message_count"] == 2

        messages = client.get("/api/growth-messages", params={
            "user_id": "user-1", "conversation_id": conversation_id,
        }).json()["messages"]
        assert [(m["role"], m["content"]) for m in messages] == [("user", "Question"), ("assistant", "Answer")]

    def test_messages_need_both_parameters(self, client):
        response = client.get("/api/growth-messages", params={"user_id": "user-1"})
        assert response.status_code == 400
        assert response.json() == {"error": "Missing required parameters"}


def test_build_transcript_labels_speakers():
    messages = [
        GrowthMessageDB(role="user", content="hi"),
        GrowthMessageDB(role="assistant", content="hello"),
    ]
    assert build_transcript(messages) == "Founder: hi\n\nAlex: hello"
