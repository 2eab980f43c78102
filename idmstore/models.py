"""Records stored in the database tables."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class Filter:
    id: int = 0
    name: str = ""


@dataclass
class Key:
    id: int = 0
    name: str = ""
    filter_id: int = 0


@dataclass
class KeyValue:
    id: int = 0
    value: str = ""
    key_id: int = 0


@dataclass
class Spam:
    id: int = 0
    text: str = ""
    time: str = ""
    chat_id: int = 0
    contact_id: int = 0


@dataclass
class Vote:
    id: int = 0
    chat_id: int = 0
    message_id: int = 0
    user_id: int = 0
    vote: int = 0


@dataclass
class Role:
    id: int = 0
    name: str = ""


@dataclass
class User:
    id: int = 0
    username: str = ""
    password: str = ""
    enabled: bool = False
    role_id: int = 0


@dataclass
class Contact:
    id: int = 0
    tg_user_id: int = 0
    username: str = ""
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    ham: int = 0
    spam: int = 0
    restrict: bool = False


@dataclass
class Chat:
    id: int = 0
    chat_id: int = 0
    username: Optional[str] = None
    title: Optional[str] = None