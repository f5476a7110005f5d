"""Book storage: an in-memory store and a PostgreSQL-backed one."""

from __future__ import annotations

import base64
import getpass
import hashlib
import hmac
import logging
import secrets
import socket
import struct
import threading
from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Protocol
from urllib.parse import unquote, urlsplit

logger = logging.getLogger(__name__)

_SELECT_BOOKS = "SELECT id, title FROM books"
_INSERT_BOOK = "INSERT INTO books (title) VALUES ($1)"


class DatabaseError(Exception):
    """Raised when the book storage cannot be set up or used."""


@dataclass(frozen=True)
class Book:
    """A stored book."""

    id: int
    title: str


@dataclass(frozen=True)
class NewBook:
    """A book about to be stored."""

    title: str


class Database(ABC):
    """Storage for books; implementations can be swapped freely."""

    @abstractmethod
    def load_all_books(self) -> list[Book]:
        """Return every stored book."""

    @abstractmethod
    def create_book(self, new_book: NewBook) -> None:
        """Store a new book."""

    @abstractmethod
    def close_connections(self) -> None:
        """Release every open connection."""


@dataclass
class DataSources:
    """The data sources handed to the server and its services."""

    db: Database | None = None


class MemoryDB(Database):
    """Books kept in a list in memory; ids count up from 0."""

    def __init__(self) -> None:
        self._records: list[Book] = []
        self._next_id = 0

    def load_all_books(self) -> list[Book]:
        return list(self._records)

    def create_book(self, new_book: NewBook) -> None:
        self._records.append(Book(id=self._next_id, title=new_book.title))
        self._next_id += 1

    def close_connections(self) -> None:
        pass


class _Pool(Protocol):
    def query(self, sql: str, *args: object) -> Sequence[Mapping[str, object]]: ...

    def execute(self, sql: str, *args: object) -> str: ...

    def close(self) -> None: ...


class PostgresDB(Database):
    """Books kept in the ``books`` table of a PostgreSQL database."""

    def __init__(self, pool: _Pool) -> None:
        self._pool = pool

    def load_all_books(self) -> list[Book]:
        try:
            rows = self._pool.query(_SELECT_BOOKS)
        except (DatabaseError, OSError) as exc:
            raise DatabaseError(f"failed to query books table: {exc}") from exc
        try:
            return [Book(id=int(row["id"]), title=str(row["title"])) for row in rows]
        except (KeyError, TypeError, ValueError) as exc:
            raise DatabaseError(f"failed to collect rows: {exc!r}") from exc

    def create_book(self, new_book: NewBook) -> None:
        try:
            self._pool.execute(_INSERT_BOOK, new_book.title)
        except (DatabaseError, OSError) as exc:
            raise DatabaseError(f"failed to insert book: {exc}") from exc

    def close_connections(self) -> None:
        self._pool.close()


def new_database(database_url: str) -> Database:
    """Create the storage that ``database_url`` names.

    An empty URL gives an in-memory store, a ``postgres://`` URL a PostgreSQL
    store that connects on first use. Raises DatabaseError otherwise.
    """
    if not database_url:
        logger.info("Using in-memory database implementation")
        return MemoryDB()
    if database_url.startswith("postgres://"):
        try:
            pool = _ConnectionPool(database_url)
        except DatabaseError as exc:
            raise DatabaseError(
                f"failed to initialize PostgreSQL database connection: {exc}"
            ) from exc
        logger.info("Using PostgreSQL database implementation")
        return PostgresDB(pool)
    raise DatabaseError(f"unsupported database URL scheme: {database_url}")


# --- A minimal PostgreSQL client speaking the frontend/backend protocol. ---


class _PostgresError(DatabaseError):
    pass


@dataclass(frozen=True)
class _Settings:
    host: str
    port: int
    user: str
    password: str
    database: str


def _default_user() -> str:
    try:
        return getpass.getuser()
    except (OSError, KeyError, ImportError):
        return "postgres"


def _parse_url(url: str) -> _Settings:
    parts = urlsplit(url)
    try:
        port = parts.port or 5432
    except ValueError as exc:
        raise DatabaseError(f"unable to create connection pool: {exc}") from exc
    user = unquote(parts.username) if parts.username else _default_user()
    return _Settings(
        host=parts.hostname or "localhost",
        port=port,
        user=user,
        password=unquote(parts.password or ""),
        database=unquote(parts.path.lstrip("/")) or user,
    )


def _cstr(text: str) -> bytes:
    return text.encode() + b"\0"


def _error_text(body: bytes) -> str:
    fields = {chr(item[0]): item[1:].decode(errors="replace") for item in body.split(b"\0") if item}
    severity = fields.get("S", "ERROR")
    message = fields.get("M", "unknown error")
    return f"{severity}: {message} (SQLSTATE {fields.get('C', '?????')})"


def _hmac(key: bytes, message: bytes) -> bytes:
    return hmac.new(key, message, hashlib.sha256).digest()


class _Connection:
    """One authenticated connection using the extended query protocol."""

    def __init__(self, settings: _Settings) -> None:
        self._sock = socket.create_connection((settings.host, settings.port), timeout=30)
        try:
            self._startup(settings)
        except BaseException:
            self._sock.close()
            raise

    def _send(self, kind: bytes, payload: bytes = b"") -> None:
        self._sock.sendall(kind + struct.pack("!i", len(payload) + 4) + payload)

    def _recv_exact(self, size: int) -> bytes:
        data = bytearray()
        while len(data) < size:
            chunk = self._sock.recv(size - len(data))
            if not chunk:
                raise _PostgresError("connection closed by server")
            data += chunk
        return bytes(data)

    def _read(self) -> tuple[bytes, bytes]:
        header = self._recv_exact(5)
        (length,) = struct.unpack("!i", header[1:])
        return header[:1], self._recv_exact(length - 4)

    def _startup(self, settings: _Settings) -> None:
        payload = (
            struct.pack("!i", 196608)
            + _cstr("user") + _cstr(settings.user)
            + _cstr("database") + _cstr(settings.database)
            + b"\0"
        )
        self._sock.sendall(struct.pack("!i", len(payload) + 4) + payload)
        while True:
            kind, body = self._read()
            if kind == b"E":
                raise _PostgresError(_error_text(body))
            if kind == b"R":
                self._authenticate(settings, body)
            elif kind == b"Z":
                return

    def _authenticate(self, settings: _Settings, body: bytes) -> None:
        (code,) = struct.unpack("!i", body[:4])
        if code == 0:
            return
        if code == 3:
            self._send(b"p", _cstr(settings.password))
        elif code == 5:
            inner = hashlib.md5((settings.password + settings.user).encode()).hexdigest()
            digest = hashlib.md5(inner.encode() + body[4:8]).hexdigest()
            self._send(b"p", _cstr("md5" + digest))
        elif code == 10:
            mechanisms = body[4:].split(b"\0")
            if b"SCRAM-SHA-256" not in mechanisms:
                raise _PostgresError("no supported SASL mechanism offered")
            self._scram(settings.password)
        else:
            raise _PostgresError(f"unsupported authentication method {code}")

    def _expect_auth(self, code: int) -> bytes:
        kind, body = self._read()
        if kind == b"E":
            raise _PostgresError(_error_text(body))
        if kind != b"R" or struct.unpack("!i", body[:4])[0] != code:
            raise _PostgresError("unexpected authentication message")
        return body[4:]

    def _scram(self, password: str) -> None:
        nonce = base64.b64encode(secrets.token_bytes(18)).decode()
        first_bare = f"n=,r={nonce}"
        initial = ("n,," + first_bare).encode()
        self._send(b"p", _cstr("SCRAM-SHA-256") + struct.pack("!i", len(initial)) + initial)

        server_first = self._expect_auth(11).decode()
        attrs = dict(item.split("=", 1) for item in server_first.split(","))
        if not attrs.get("r", "").startswith(nonce):
            raise _PostgresError("server nonce does not match")
        salted = hashlib.pbkdf2_hmac(
            "sha256", password.encode(), base64.b64decode(attrs["s"]), int(attrs["i"])
        )
        client_key = _hmac(salted, b"Client Key")
        without_proof = f"c=biws,r={attrs['r']}"
        auth_message = f"{first_bare},{server_first},{without_proof}".encode()
        signature = _hmac(hashlib.sha256(client_key).digest(), auth_message)
        proof = bytes(a ^ b for a, b in zip(client_key, signature))
        self._send(b"p", f"{without_proof},p={base64.b64encode(proof).decode()}".encode())

        server_final = self._expect_auth(12).decode()
        expected = _hmac(_hmac(salted, b"Server Key"), auth_message)
        verifier = dict(item.split("=", 1) for item in server_final.split(",")).get("v", "")
        if not hmac.compare_digest(base64.b64decode(verifier), expected):
            raise _PostgresError("server signature does not match")

    def run(self, sql: str, args: Sequence[object]) -> tuple[list[str], list[list[str | None]], str]:
        params = b"".join(
            struct.pack("!i", -1) if arg is None
            else struct.pack("!i", len(encoded := str(arg).encode())) + encoded
            for arg in args
        )
        self._send(b"P", b"\0" + _cstr(sql) + struct.pack("!H", 0))
        self._send(b"B", b"\0\0" + struct.pack("!HH", 0, len(args)) + params + struct.pack("!H", 0))
        self._send(b"D", b"P\0")
        self._send(b"E", b"\0" + struct.pack("!i", 0))
        self._send(b"S")

        columns: list[str] = []
        rows: list[list[str | None]] = []
        tag = ""
        error: str | None = None
        while True:
            kind, body = self._read()
            if kind == b"T":
                columns = self._columns(body)
            elif kind == b"D":
                rows.append(self._row(body))
            elif kind == b"C":
                tag = body.rstrip(b"\0").decode()
            elif kind == b"E":
                error = _error_text(body)
            elif kind == b"Z":
                break
        if error is not None:
            raise _PostgresError(error)
        return columns, rows, tag

    @staticmethod
    def _columns(body: bytes) -> list[str]:
        (count,) = struct.unpack("!H", body[:2])
        names = []
        position = 2
        for _ in range(count):
            end = body.index(b"\0", position)
            names.append(body[position:end].decode())
            position = end + 1 + 18
        return names

    @staticmethod
    def _row(body: bytes) -> list[str | None]:
        (count,) = struct.unpack("!H", body[:2])
        values: list[str | None] = []
        position = 2
        for _ in range(count):
            (length,) = struct.unpack("!i", body[position:position + 4])
            position += 4
            if length < 0:
                values.append(None)
                continue
            values.append(body[position:position + length].decode())
            position += length
        return values

    def close(self) -> None:
        try:
            self._send(b"X")
        except OSError:
            pass
        finally:
            self._sock.close()


class _ConnectionPool:
    """A pool holding a single connection, opened on first use."""

    def __init__(self, url: str) -> None:
        self._settings = _parse_url(url)
        self._lock = threading.Lock()
        self._connection: _Connection | None = None

    def _run(self, sql: str, args: Sequence[object]):
        with self._lock:
            if self._connection is None:
                self._connection = _Connection(self._settings)
            try:
                return self._connection.run(sql, args)
            except OSError:
                self._connection.close()
                self._connection = None
                raise

    def query(self, sql: str, *args: object) -> list[dict[str, str | None]]:
        columns, rows, _ = self._run(sql, args)
        return [dict(zip(columns, row)) for row in rows]

    def execute(self, sql: str, *args: object) -> str:
        _, _, tag = self._run(sql, args)
        return tag

    def close(self) -> None:
        with self._lock:
            if self._connection is not None:
                self._connection.close()
                self._connection = None