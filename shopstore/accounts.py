"""Account validation, login and registration."""

from __future__ import annotations

import re
import sqlite3

_ACCOUNT_RE = re.compile(r"[1-9][0-9]{7,11}")
_LETTERS_AND_DIGITS_RE = re.compile(
    r"(?=.*\d)(?=.*[A-Za-z])[\da-zA-Z]{8,15}", re.ASCII
)

BAD_FORMAT = "账号或密码格式不正确,请重新输入"
BAD_CREDENTIALS = "账号或密码错误"
MISMATCH = "两次输入的密码不一致"
ALREADY_EXISTS = "账号已经存在,注册失败"
DATABASE_FAILURE = "注册失败，数据库错误，请稍后重试"


def check_account(account: str) -> bool:
    """An account is 8 to 12 digits not starting with zero."""
    return _ACCOUNT_RE.fullmatch(account) is not None


def check_password(password: str) -> bool:
    """A password is 8 to 15 letters and digits with at least one of each."""
    return _LETTERS_AND_DIGITS_RE.fullmatch(password) is not None


class AccountError(Exception):
    """Login or registration was refused; the message says why."""


class AccountStore:
    """User accounts kept in the ``user_account`` table of a SQLite connection."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self.connection = connection

    def create_schema(self) -> None:
        self.connection.execute(
            "CREATE TABLE IF NOT EXISTS user_account ("
            "account TEXT PRIMARY KEY, password TEXT NOT NULL)"
        )
        self.connection.commit()

    def login(self, account: str, password: str) -> str:
        """Return the account when the credentials match, else raise AccountError."""
        if not check_account(account) or not check_password(password):
            raise AccountError(BAD_FORMAT)
        try:
            row = self.connection.execute(
                "SELECT account, password FROM user_account "
                "WHERE account = ? AND password = ?",
                (account, password),
            ).fetchone()
        except sqlite3.Error as exc:
            raise AccountError(BAD_CREDENTIALS) from exc
        if row is None:
            raise AccountError(BAD_CREDENTIALS)
        return account

    def register(self, account: str, password: str, confirm: str) -> None:
        if password != confirm:
            raise AccountError(MISMATCH)
        if not check_account(account) or not check_password(password):
            raise AccountError(BAD_FORMAT)
        try:
            existing = self.connection.execute(
                "SELECT account FROM user_account WHERE account = ?", (account,)
            ).fetchone()
        except sqlite3.Error as exc:
            raise AccountError(ALREADY_EXISTS) from exc
        if existing is not None:
            raise AccountError(ALREADY_EXISTS)
        try:
            self.connection.execute(
                "INSERT INTO user_account (account, password) VALUES (?, ?)",
                (account, password),
            )
            self.connection.commit()
        except sqlite3.Error as exc:
            raise AccountError(DATABASE_FAILURE) from exc