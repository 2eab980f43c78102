"""Repositories that read and insert records of each table."""

from __future__ import annotations

from dataclasses import asdict, fields
from typing import Any, ClassVar

from idmstore.models import Chat, Contact, Filter, Key, KeyValue, Role, Spam, User, Vote


def _quote(column: str) -> str:
    return f'"{column}"'


class Repository:
    """Access to one table through a DB-API connection with named parameters."""

    table: ClassVar[str] = ""
    model: ClassVar[type] = object
    columns: ClassVar[tuple[str, ...]] = ()

    def __init__(self, db: Any) -> None:
        self._db = db

    def _to_model(self, names: list[str], row: tuple) -> Any:
        known = {f.name: f for f in fields(self.model)}
        values = {}
        for name, value in zip(names, row):
            field = known.get(name)
            if field is None:
                raise ValueError(f"missing destination name {name} in {self.model.__name__}")
            if field.type in (bool, "bool") and value is not None:
                value = bool(value)
            values[name] = value
        return self.model(**values)

    def _select(self, query: str, params: dict[str, Any] | None = None) -> list[Any]:
        cursor = self._db.cursor()
        try:
            cursor.execute(query, params or {})
            names = [column[0] for column in cursor.description]
            return [self._to_model(names, row) for row in cursor.fetchall()]
        finally:
            cursor.close()

    def find_all(self) -> list[Any]:
        """Return every record of the table."""
        return self._select(f"SELECT * FROM {self.table}")

    def find_by_id(self, record_id: int) -> Any:
        """Return the record with the given id; raise LookupError if there is none."""
        found = self._select(
            f"SELECT * FROM {self.table} WHERE id = :id", {"id": record_id}
        )
        if not found:
            raise LookupError(f"no row in {self.table} with id {record_id}")
        return found[0]

    def add(self, item: Any) -> int:
        """Insert the record (its id is ignored) and return the new id."""
        values = asdict(item)
        query = "INSERT INTO {} ({}) VALUES ({})".format(
            self.table,
            ", ".join(_quote(c) for c in self.columns),
            ", ".join(f":{c}" for c in self.columns),
        )
        cursor = self._db.cursor()
        try:
            cursor.execute(query, {c: values[c] for c in self.columns})
            new_id = cursor.lastrowid or 0
        finally:
            cursor.close()
        self._db.commit()
        return new_id


class FilterRepository(Repository):
    table = "dionea_filter"
    model = Filter
    columns = ("name",)


class KeyRepository(Repository):
    table = "dionea_key"
    model = Key
    columns = ("name", "filter_id")


class KeyValueRepository(Repository):
    table = "dionea_key_value"
    model = KeyValue
    columns = ("value", "key_id")


class SpamRepository(Repository):
    table = "dionea_spam"
    model = Spam
    columns = ("text", "time", "chat_id", "contact_id")


class VoteRepository(Repository):
    table = "dionea_vote"
    model = Vote
    columns = ("chat_id", "message_id", "user_id", "vote")


class RoleRepository(Repository):
    table = "dionea_role"
    model = Role
    columns = ("name",)


class UserRepository(Repository):
    table = "dionea_user"
    model = User
    columns = ("username", "password", "enabled", "role_id")


class ContactRepository(Repository):
    table = "dionea_contact"
    model = Contact
    columns = ("tg_user_id", "username", "first_name", "last_name", "ham", "spam", "restrict")


class ChatRepository(Repository):
    table = "dionea_chat"
    model = Chat
    columns = ("chat_id", "username", "title")