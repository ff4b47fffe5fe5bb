"""Reading values out of Secret objects."""

from __future__ import annotations

from typing import Any, Union


def _decode(value: Union[bytes, str]) -> str:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="surrogateescape")
    return value


def _load(reader: Any, secret_name: str, namespace: str, data_key: str) -> str:
    secret = reader.get(secret_name, namespace)
    data = secret.get("data") or {}
    try:
        value = data[data_key]
    except KeyError:
        raise KeyError(f"secret {secret_name} did not contain key {data_key}") from None
    return _decode(value)


def load_secret_data(api_reader: Any, secret_name: str, namespace: str, data_key: str) -> str:
    """Return one data entry of a secret as text, read through ``api_reader``.

    Lookup errors from the reader propagate; a missing key raises KeyError.
    """
    return _load(api_reader, secret_name, namespace, data_key)


def load_secret_data_using_client(
    client: Any, secret_name: str, namespace: str, data_key: str
) -> str:
    """Return one data entry of a secret as text, read through ``client``."""
    return _load(client, secret_name, namespace, data_key)