"""Mapping dataclasses onto SQLite tables."""

import dataclasses
import hashlib
import sqlite3
from dataclasses import dataclass

_TYPE_META_TABLE = "__TYPE_META__"
_TABLE_MARK = "__sql_table__"
_SQL_TYPES = {str: "TEXT", float: "REAL", int: "INTEGER", bool: "INTEGER"}
_TYPE_NAMES = {"int": int, "str": str, "bool": bool, "float": float}


class SQLException(Exception):
    """A table could not be created, written or read."""

    def __init__(self, reason):
        super().__init__(reason)
        self.reason = reason


def sql_field(
    default=dataclasses.MISSING, primary_key=False, nullable=False, manual_primary_key=False
):
    """A dataclass field carrying column attributes."""
    attrs = {
        "primary_key": primary_key,
        "nullable": nullable,
        "manual_primary_key": manual_primary_key,
    }
    return dataclasses.field(default=default, metadata={"sql": attrs})


def sql_table(name=None):
    """Mark a dataclass as a table row type; the table is ``name`` or the class name."""

    def mark(cls):
        setattr(cls, _TABLE_MARK, name)
        return cls

    return mark


def type_meta_table_name():
    """Name of the table recording which type each table stores."""
    return _TYPE_META_TABLE


def _execute(db, sql, params=()):
    try:
        with db:
            return db.execute(sql, params).fetchall()
    except sqlite3.Error as exc:
        raise SQLException(str(exc)) from exc


def _resolve(annotation):
    """The field type, with string annotations of primitive types resolved."""
    if isinstance(annotation, str):
        return _TYPE_NAMES.get(annotation.strip(), annotation)
    return annotation


def _columns(row_type):
    return [(f, _resolve(f.type)) for f in dataclasses.fields(row_type)]


def _type_name(row_type):
    return f"{row_type.__module__}.{row_type.__qualname__}"


def _type_hash(row_type):
    digest = hashlib.sha256(_type_name(row_type).encode("utf-8")).digest()
    return int.from_bytes(digest[:8], "big") >> 1


def initialize_database(db):
    """Create the type meta table if it is missing."""
    _execute(
        db,
        f"""CREATE TABLE IF NOT EXISTS {_TYPE_META_TABLE} (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    table_name TEXT NOT NULL,
    type_name TEXT NOT NULL,
    type_hash INTEGER NOT NULL
);""",
    )


@dataclass
class SQLTable:
    """A table whose rows are instances of ``row_type``."""

    row_type: type
    db: sqlite3.Connection
    table_name: str

    def _check_type(self, row_type):
        if row_type is not self.row_type:
            raise ValueError("input type does not match the table type")

    def insert(self, data):
        """Insert one row; integer, boolean and text fields are stored."""
        self._check_type(type(data))
        names, values = [], []
        for f, field_type in _columns(self.row_type):
            value = getattr(data, f.name)
            if field_type in (bool, int):
                if not isinstance(value, int):
                    raise SQLException("Wrong storage type")
                values.append(int(value))
            elif field_type is str:
                if not isinstance(value, str):
                    raise SQLException("Wrong storage type")
                values.append(value)
            else:
                raise SQLException("Wrong storage type")
            names.append(f.name)
        placeholders = ", ".join(["?"] * len(names))
        _execute(
            self.db,
            f"INSERT INTO {self.table_name} ({', '.join(names)}) VALUES ({placeholders});",
            values,
        )

    def query(self, row_type, where=""):
        """Rows matching the SQL condition ``where`` (all rows when empty)."""
        self._check_type(row_type)
        columns = _columns(row_type)
        sql = f"SELECT {', '.join(f.name for f, _ in columns)} FROM {self.table_name}"
        if where:
            sql += f" WHERE {where}"
        results = []
        for row in _execute(self.db, sql):
            init_values, late_values = {}, {}
            for (f, field_type), raw in zip(columns, row):
                value = _convert(field_type, raw)
                (init_values if f.init else late_values)[f.name] = value
            item = row_type(**init_values)
            for name, value in late_values.items():
                setattr(item, name, value)
            results.append(item)
        return results


def _convert(field_type, raw):
    if field_type is bool:
        return raw is not None and int(raw) != 0
    if field_type is int:
        return 0 if raw is None else int(raw)
    if field_type is float:
        return 0.0 if raw is None else float(raw)
    if field_type is str:
        return "" if raw is None else str(raw)
    raise SQLException("Wrong query type")


def _create_type_table(db, name, row_type):
    columns = _columns(row_type)
    for f, field_type in columns:
        if field_type not in _SQL_TYPES:
            type_label = getattr(field_type, "__name__", str(field_type))
            raise SQLException(
                f"All fields of table type {name} must be primitive, "
                f"but field {f.name} has type {type_label}"
            )
    attrs = [f.metadata.get("sql", {}) for f, _ in columns]
    if not any(a.get("primary_key") for a in attrs):
        raise SQLException(f"Table type {name} has no PrimaryKey")
    definitions = []
    for (f, field_type), attr in zip(columns, attrs):
        parts = [f.name, _SQL_TYPES[field_type]]
        if not attr.get("nullable"):
            parts.append("NOT NULL")
        if attr.get("primary_key"):
            parts.append("PRIMARY KEY")
            if not attr.get("manual_primary_key"):
                parts.append("AUTOINCREMENT")
        definitions.append(" ".join(parts))
    _execute(db, f"CREATE TABLE IF NOT EXISTS {name} ({', '.join(definitions)});")
    _execute(
        db,
        f"INSERT INTO {_TYPE_META_TABLE} (table_name, type_name, type_hash) VALUES (?, ?, ?);",
        (name, _type_name(row_type), _type_hash(row_type)),
    )
    return SQLTable(row_type, db, name)


def create_table(db, row_type, allow_exist=True):
    """The table for a ``sql_table`` dataclass, created when missing.

    Raises ``SQLException`` when the table exists and ``allow_exist`` is false.
    """
    if row_type is None:
        raise ValueError("row_type must not be None")
    if not dataclasses.is_dataclass(row_type) or not hasattr(row_type, _TABLE_MARK):
        raise ValueError("row_type must be a dataclass marked with sql_table")
    table_name = getattr(row_type, _TABLE_MARK) or row_type.__name__
    exists = _execute(
        db, "SELECT 1 FROM sqlite_master WHERE type='table' AND name=?", (table_name,)
    )
    if exists:
        if not allow_exist:
            raise SQLException(f"Table {table_name} already exists.")
        return SQLTable(row_type, db, table_name)
    return _create_type_table(db, table_name, row_type)