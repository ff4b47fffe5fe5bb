# operatorkit

Small helpers with no dependencies for writing Kubernetes operators in Python.
Objects are plain dictionaries shaped like manifests, such as
`{"metadata": {...}, "status": {...}, "data": {...}}`. Clients are any objects
that have the methods described below.

## What it does not do

The package has no Kubernetes client and does not connect to a cluster. It
does not run a controller loop or watch resources. Every function that reads
or writes objects uses the client you pass in.

## Modules

### `operatorkit.labels`

- `add_label(labels, key, value)` sets `labels[key] = value` and returns the
  map. If `labels` is `None`, it creates a new dict first. If `key` is empty,
  it returns `labels` unchanged.
- `selector_from_set(labels)` returns a `Selector` that requires every
  key/value pair in the mapping.
- `get_label_selector(key, value)` returns a selector for `key=value`. If
  `key` is empty, it returns an empty selector.
- `Selector.matches(labels)` is true when every required pair is present.
  `Selector.empty()` is true when there are no requirements, and an empty
  selector matches everything. `str(selector)` gives `k1=v1,k2=v2`, sorted
  by key.

### `operatorkit.util`

- `get_operator_namespace(path=NAMESPACE_FILE)` reads the service-account
  namespace file and returns its contents with surrounding whitespace removed.
  By default it reads
  `/var/run/secrets/kubernetes.io/serviceaccount/namespace`. If the file is
  missing, it raises `FileNotFoundError("cannot find namespace of the operator")`.
- `time_elapsed(function_name)` is a context manager that can also be used as
  a decorator. When the block ends, it prints a line such as
  `reconcile took 12.5ms`.
- `get_label_selector(key, value)` is the same as the function in `labels`.

### `operatorkit.crd`

- `established(crd)` is true when one of the CRD's `status.conditions` has
  `type == "Established"` and `status == "True"`.

### `operatorkit.finalizer`

- `has_finalizer(obj, finalizer)` checks `metadata.finalizers`.
- `add_finalizer(obj, finalizer)` and `delete_finalizer(obj, finalizer)`
  change the object in place. Afterwards, the finalizer list is sorted and has
  no duplicates. `metadata` is created if it does not exist.

### `operatorkit.objects`

`create_or_update(client, obj, mutate)` returns an `OperationResult`, which
is one of `CREATED`, `UPDATED` or `NONE`.

The client must provide:

- `get(name, namespace)`, which returns the stored object or raises
  `NotFoundError`.
- `create(obj)`.
- `update(obj)`.

If the object is not found, `mutate(obj)` is applied and the object is
created.

If the object exists, `obj` is first replaced with the stored state and then
`mutate(obj)` is applied. The object is written back only if something
changed.

If `mutate` changes the object's name or namespace, `create_or_update` raises
`ValueError`. When the module flag `objects.DEBUG` is true, a diff of each
mutation is printed.

### `operatorkit.reconciler`

- `Result(requeue=False, requeue_after=timedelta(0))` tells the controller
  whether and when to requeue the resource.
- `Condition(type, status, reason="", message="", last_transition_time=now)`
  is a status condition.
- `ConditionsStatusAware` is a runtime-checkable protocol with
  `get_reconcile_status()` and `set_reconcile_status(conditions)`.
- `manage_success(client, obj)` records a `ReconcileSuccess` condition and
  returns `Result()`. The condition has reason `Successful` and message
  `Awaiting next reconciliation`.
- `manage_error(client, obj, issue, is_retriable)` records a
  `ReconcileError` condition with reason `Failed`. If `is_retriable` is true,
  it raises `issue` again. Otherwise it logs the issue and returns `Result()`.
- In both functions, a condition is recorded only on objects that implement
  `ConditionsStatusAware`. The condition is then saved with
  `client.update_status(obj)`, and any error from that call is raised.
- `do_not_requeue()` returns `Result()`.
- `requeue_with_error(err)` raises `err`.
- `requeue_after(requeue_time)` returns a `Result` that requeues after
  `requeue_time`. It takes a `timedelta` or a number of seconds.

Logging goes to the `operator-utils.reconciler` logger.

### `operatorkit.resourcefiltering`

- `Allow(literal=[...]).passes(s)` is true only for strings in the list.
- `Deny(literal=[...]).passes(s)` is true for every string not in the list.
- `AllowDeny(allow=None, deny=None).passes(s)` works as follows:
  - If `allow` is set, only `allow` is checked.
  - If only `deny` is set, only `deny` is checked.
  - If neither is set, everything passes.
- `is_allowed(ad, name)` calls `ad.passes(name)`. It is always `False` when
  `ad` is `None`.
- `Matcher` is the runtime-checkable protocol with a `passes` method.

### `operatorkit.secrets`

`load_secret_data(api_reader, secret_name, namespace, data_key)` and
`load_secret_data_using_client(client, secret_name, namespace, data_key)` do
the same job:

1. They call `.get(secret_name, namespace)` on the reader or client.
2. They return `data[data_key]` as text. Byte values are decoded as UTF-8.

If the key is missing, they raise
`KeyError("secret <name> did not contain key <key>")`. Errors from `.get`
are passed through unchanged.

## Example

```python
from operatorkit.labels import add_label, get_label_selector
from operatorkit.resourcefiltering import Allow, AllowDeny, is_allowed

labels = add_label(None, "app", "web")
selector = get_label_selector("app", "web")
assert selector.matches(labels)

rules = AllowDeny(allow=Allow(literal=["team-a", "team-b"]))
assert is_allowed(rules, "team-a")
assert not is_allowed(rules, "team-c")
assert not is_allowed(None, "team-a")
```