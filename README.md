# idmstore

Record types and repositories for the tables of a spam-moderation
database: filters, keys and key values, spam reports, votes, roles,
users, contacts and chats. The connection settings are read from a
`.env` file.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Configuration

The connection is described by two variables in a `.env` file:

```
DB_DRIVER_NAME=sqlite3
DB_DSN=idm.db
```

`DB_DRIVER_NAME` chooses the driver and `DB_DSN` is the data source
passed to it. The drivers known are `sqlite3` and `sqlite`, both backed
by Python's built-in `sqlite3` module; `DB_DSN` is then the path of the
database file (or `:memory:`).

Variables from the file are copied into the process environment, but a
variable that is already set in the environment is left as it is and
takes precedence over the file.

## Checking the connection

```
idmstore
idmstore path/to/settings.env
```

The command reads `.env` from the current directory (or the file given
as its argument), opens the database, prints
`Database connection established`, closes the connection again and
exits with status 0. If the settings cannot be loaded or the database
cannot be opened, it prints `error: ...` to standard error and exits
with status 1.

## Using the library

```python
from idmstore.database import new_db, ConfigError, DbError
from idmstore.models import Filter
from idmstore.repositories import FilterRepository

try:
    db = new_db(".env")
except ConfigError:
    ...  # the .env file could not be loaded
except DbError:
    ...  # unknown driver, or the database could not be opened

filters = FilterRepository(db)
new_id = filters.add(Filter(name="links"))
print(filters.find_by_id(new_id))
for item in filters.find_all():
    print(item)

db.close()
```

### `idmstore.database`

- `load(path)` reads the dotenv file into the environment as described
  above and returns a `DbConfig(driver_name, dsn)`. It raises `OSError`
  when the file cannot be read.
- `new_db(path)` loads the settings and returns an open connection that
  has been checked with a trivial query. It raises `ConfigError` when
  the file cannot be loaded, and `DbError` when the driver name is not
  known or the connection fails. Connections are opened in autocommit
  mode.

### `idmstore.models`

Dataclasses with one field per column: `Filter`, `Key`, `KeyValue`,
`Spam`, `Vote`, `Role`, `User`, `Contact` and `Chat`. Every field has a
default (`0`, `""`, `False`, or `None` for the nullable `first_name`,
`last_name`, `username` and `title` of contacts and chats).

### `idmstore.repositories`

Every table has its own repository, built on `Repository`, with the same
three methods:

- `find_all()` returns every row of the table as records.
- `find_by_id(record_id)` returns the row with that id, or raises
  `LookupError` when there is none.
- `add(item)` inserts the record, ignoring its `id`, commits, and
  returns the id the database assigned to it.

| Repository             | Table              | Record     |
|------------------------|--------------------|------------|
| `FilterRepository`     | `dionea_filter`    | `Filter`   |
| `KeyRepository`        | `dionea_key`       | `Key`      |
| `KeyValueRepository`   | `dionea_key_value` | `KeyValue` |
| `SpamRepository`       | `dionea_spam`      | `Spam`     |
| `VoteRepository`       | `dionea_vote`      | `Vote`     |
| `RoleRepository`       | `dionea_role`      | `Role`     |
| `UserRepository`       | `dionea_user`      | `User`     |
| `ContactRepository`    | `dionea_contact`   | `Contact`  |
| `ChatRepository`       | `dionea_chat`      | `Chat`     |

A repository accepts any DB-API connection that supports `:name`
parameters and `cursor.lastrowid`. Columns read back that the record
type does not have raise `ValueError`; integer values in boolean fields
are turned into `bool`.

## What it does not do

- It does not create the tables; the schema must already exist in the
  database.
- Only SQLite is supported by `new_db`; no other database servers can
  be reached through it.
- Records can be read and inserted, but not updated or deleted.