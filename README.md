# officer-service

A small Flask API for publishing a list of officers and letting an
administrator add new ones after logging in with a shared admin phrase.

## Endpoints

| Method | Path                  | Auth            | Purpose                              |
|--------|-----------------------|-----------------|--------------------------------------|
| GET    | `/officers`           | none            | List every officer, ordered by id    |
| POST   | `/opme`               | admin phrase    | Log in and receive a `sessid` cookie |
| POST   | `/auth/officers`      | `sessid` cookie | Create an officer                    |
| GET    | `/auth/sessions`      | `sessid` cookie | Show the stored sessions             |
| GET    | `/swagger/doc.json`   | none            | Swagger 2.0 description of the API   |

Requests under `/auth/` without a known `sessid` cookie get an empty
`401` response.

`POST /opme` takes `{"password": "..."}`. A missing or malformed body gives
`400 {"error": "bad request"}`, a wrong phrase gives `401`, and a correct
one gives `200 {"message": "Success!"}` with a `sessid` cookie that is
`HttpOnly`, `SameSite=Lax`, valid for 30 minutes, and `Secure` when the
application's `SESSION_COOKIE_SECURE` setting is true.

`POST /auth/officers` takes `name` and `title` (required strings, trimmed)
and optional `linkedin` and `image_uri` (trimmed; blank values are stored
as null). It answers `201` with the stored officer:

```json
{"id": 1, "name": "Ada", "title": "President", "linkedin": null, "image_uri": null}
```

`GET /officers` answers `{"officers": [...]}` in the same shape.

## Installing

```
pip install .
```

## Configuration

Settings come from the environment. A `.env` file in the working directory
is read first (`officer_service.env.load_dotenv`); variables already set are
never overridden. Blank lines and `#` comments are skipped, lines may start
with `export `, values may be wrapped in single or double quotes, and
`$NAME` / `${NAME}` are expanded from the environment.

| Variable                    | Required | Default | Meaning                                          |
|-----------------------------|----------|---------|--------------------------------------------------|
| `ADMIN_PHRASE`              | yes      |         | Phrase accepted by `POST /opme`                  |
| `DATABASE_URL`              | yes      |         | SQLite database: a file path or `sqlite:///path` |
| `DB_CONNECT_TIMEOUT`        | no       | `45s`   | How long to keep trying to connect               |
| `DB_CONNECT_RETRY_INTERVAL` | no       | `2s`    | Pause between connection attempts                |
| `APP_MODE`                  | no       |         | `release` marks the session cookie `Secure`      |

Durations are written like `30s`, `2m`, `1h30m` or `500ms` and must be
greater than zero.

Example `.env`:

```
ADMIN_PHRASE=placeholder
DATABASE_URL=sqlite:///officers.db
DB_CONNECT_TIMEOUT=30s
```

## Schema

The command applies a schema file at start-up (`schema.sql` in the working
directory unless `--schema` says otherwise). It must create the `officers`
table, for example:

```sql
CREATE TABLE IF NOT EXISTS officers (
    id        INTEGER PRIMARY KEY AUTOINCREMENT,
    name      TEXT NOT NULL,
    title     TEXT NOT NULL,
    linkedin  TEXT,
    image_uri TEXT
);
```

Inserts use `RETURNING`, so SQLite 3.35 or later is needed.

## Running

```
officer-service
officer-service --schema path/to/schema.sql --port 9000
```

The server listens on all interfaces, port 8080 by default. A background
thread drops expired sessions every five minutes.

## Using it

```
curl -c cookies.txt -X POST localhost:8080/opme \
     -H 'Content-Type: application/json' -d '{"password": "placeholder"}'

curl -b cookies.txt -X POST localhost:8080/auth/officers \
     -H 'Content-Type: application/json' \
     -d '{"name": "Ada", "title": "President", "linkedin": " "}'

curl localhost:8080/officers
```

## Embedding

`officer_service.app.create_app(queries, store, admin_phrase)` builds the
Flask application from a `Queries`, a `SessionStore` and the admin phrase,
so it can be served by any WSGI server or driven with Flask's test client.

- `officer_service.queries.Queries(connection, paramstyle="qmark")` runs
  `create_officer`, `get_officer`, `list_officers` and `delete_officer`
  over any DB-API connection whose placeholder style is `qmark`, `format`
  or `numeric`. `get_officer` raises `LookupError` when no row matches.
- `officer_service.database.init_db(connect, schema_sql)` reads the
  settings above, calls `connect(DATABASE_URL)` with retries, applies the
  schema and returns a `Queries`; failures raise `DatabaseError`.
- `officer_service.sessions.SessionStore` keeps sessions in memory;
  `officer_service.docs.swagger_spec()` returns the API description as a
  dictionary.

## Limits

- The command only talks to SQLite; other databases need a `connect`
  callable passed to `init_db` from your own code.
- No schema file ships with the package.
- Only the Swagger JSON document is served; there is no Swagger UI.
- Sessions live in memory and are lost on restart. A stored session is
  accepted until the cleanup thread removes it, which may be up to five
  minutes after it expires.