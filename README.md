# adminkit

Building blocks for the back end of an admin application: a plain
request context, JSON response envelopes, a process-wide registry with
tenant-prefixed cache, queue and locker adapters, JWT claim access, and
a handful of small utilities.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Request context

`adminkit.context.RequestContext` is a plain object holding one
request's method, path, headers, path parameters and query values. It
stores values by key (`get`, `set`), records response headers
(`set_header`) and the final response (`abort_with_status_json`, which
sets `status`, `body` and `aborted`).

- `generate_msg_id(ctx)` returns the `X-Request-Id` header, creating a
  UUID and writing it to the response headers when it is missing.
- `get_orm(ctx)` returns the database handle stored under `"db"` and
  raises `LookupError` when there is none.

`adminkit.checks` has `ensure(condition, msg, code=200)` and
`has_error(err, msg="", code=200)`, both raising `CustomError` (with
`code` and `message`) to stop handling a request.

## Responses

```python
from adminkit.context import RequestContext
from adminkit import response

ctx = RequestContext()
response.ok(ctx, {"name": "demo"}, "done")
# ctx.status == 200
# ctx.body == {"requestId": "<uuid>", "code": 200, "msg": "done", "data": {"name": "demo"}}
```

`adminkit.response` offers `ok`, `error`, `page_ok` (data wrapped in a
`Page` with `count`, `pageIndex`, `pageSize` and `list`) and `custom`.
Error envelopes carry `status: "error"`; a given `msg` overrides the
error's text.

`adminkit.antd` provides the same helpers shaped for Ant Design front
ends: `ok`, `up_file_ok`, `error`, `page_ok` (page position at the top
level), `list_ok` (a `ListData` nested under `data`) and `custom`.
`ShowType` lists the display modes of an error; empty fields are left
out of the JSON body.

`adminkit.api_exception.APIException` is an exception that also serves
as a result body (`code`, `success`, `msg`, `timestamp`, `result`), with
the builders `server_error`, `not_found`, `unknown_error`,
`parameter_error`, `auth_error` and `response_json`.

## Runtime application

```python
from adminkit.application import Application

app = Application()
app.set_config("site", "demo")
tenant_cache = app.cache_adapter("tenant-a:")
```

`Application` holds databases, enforcers, crontabs, middlewares,
handlers and configuration values by key. For databases, enforcers and
crontabs an entry under `"*"` answers every lookup. `routers()` reads
the route table of `app.engine` when it has a `routes()` method. A
shared instance is available as `adminkit.application.runtime`.

`cache_adapter`, `queue_adapter` and `locker_adapter` wrap the
configured `cache`, `queue` and `locker` objects in `PrefixedCache`,
`PrefixedQueue` and `PrefixedLocker` from `adminkit.prefixed`: every key
is put behind the prefix, and every appended `Message` gets the prefix
under `"__prefix"` in its values. `memory_queue(prefix)` returns a
prefixed view of a built-in in-process queue that runs one consumer
thread per registered stream on `run()` and stops them on `shutdown()`.
`PrefixedCache.token` and `put_token` store an OAuth2 token as JSON
until 200 seconds before it expires.

`adminkit.service.Service` carries a service's database handle, logger,
cache and collected errors; `add_error` joins errors as `"first; second"`.

`adminkit.captcha_store.CacheStore(cache, expiration)` keeps captcha
answers in any object with `get`, `set` and `delete`, with `set`, `get`
(optionally clearing) and `verify`.

## Connection options

`adminkit.connect_options` has `RedisConnectOptions.redis_options()`
and `NSQOptions.nsq_config()`, which return dictionaries of client
options (NSQ durations given in seconds, `max_backoff_duration` in
milliseconds, over built-in defaults). `build_tls_context(TlsConfig)`
builds an `ssl.SSLContext` that presents a certificate and requires
client certificates signed by the given CA. `get_redis_client` and
`set_redis_client` keep one shared client object, calling `shutdown()`
on a replaced one.

## Claims and users

```python
from adminkit.claims import MapClaims

claims = MapClaims({"identity": "42", "nice": "demo"})
claims.identity()          # 42
claims.as_string("nice")   # "demo"
```

`MapClaims` converts values with `as_int64`, `as_int`, `as_uint64` and
`as_string`, and has shortcuts `exp`, `orig_iat` and `identity`.
`adminkit.user` reads the claims stored on a request context under
`"JWT_PAYLOAD"`: `get_user_id`, `get_user_id_str`, `get_user_name`,
`get_role_id`, `get_role_name`, `get_dept_id` and `get_dept_name`
return 0 or `""` (with a logged warning for the numeric ones) when a
claim is missing or invalid.

## Utilities

- `adminkit.security`: random keys (`generate_random_key20`, `16`, `6`),
  scrypt password derivation (`set_password`), bcrypt checking
  (`compare_hash_and_password`)
- `adminkit.convert`: `round_half`, strict `string_to_int`, id lists from
  comma-separated text, `current_time_str`, `struct_to_json_str`, run `Mode`
- `adminkit.sharding`: CRC32 shard numbers out of 32, 16 or 8 tables and
  `dynamic_table`, a scope calling `db.table("<base>_<shard>")`
- `adminkit.helpers`: MD5 hex, UUIDs without dashes, recursive file
  listing, base64 decoding, millisecond timestamps, order-keeping
  de-duplication
- `adminkit.jsontime.JSONTime`: a timestamp serialised as
  `"YYYY-MM-DD HH:MM:SS"` that stores `None` when unset
- `adminkit.translate.translate`: copies fields with matching names and types
- `adminkit.httpclient`: `http_get` and JSON `http_post`
- `adminkit.textcolor`: ANSI colouring

## What is not included

adminkit does not load configuration files or build application
settings from them, has no websocket client manager, and has no
file-system helpers for creating paths, tailing files or detecting
content types. It is not an HTTP server either: `RequestContext` is
filled in and read by whatever server code uses it. The cache, queue
and locker adapters wrap objects you supply (apart from the in-process
memory queue); no Redis or NSQ client is included.