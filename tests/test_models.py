from dataclasses import asdict

from idmstore.models import Chat, Contact, Filter, Key, KeyValue, Role, Spam, User, Vote


def test_contact_columns_match_table():
    assert list(asdict(Contact())) == [
        "id",
        "tg_user_id",
        "username",
        "first_name",
        "last_name",
        "ham",
        "spam",
        "restrict",
    ]


def test_defaults_are_empty():
    contact = Contact()
    assert contact.first_name is None and contact.last_name is None
    assert contact.restrict is False
    assert Chat() == Chat(id=0, chat_id=0, username=None, title=None)


def test_asdict_round_trip():
    for record in (
        Filter(id=3, name="links"),
        Key(id=4, name="word", filter_id=3),
        KeyValue(id=5, value="casino", key_id=4),
        Spam(id=6, text="buy", time="2024-01-01", chat_id=7, contact_id=8),
        Vote(id=1, chat_id=2, message_id=3, user_id=4, vote=-1),
        Role(id=2, name="admin"),
        User(id=9, username="alice", enabled=True, role_id=2),
    ):
        assert type(record)(**asdict(record)) == record


def test_equality_depends_on_values():
    assert Filter(id=1, name="a") == Filter(id=1, name="a")
    assert not Filter(id=1, name="a") == Filter(id=2, name="a")