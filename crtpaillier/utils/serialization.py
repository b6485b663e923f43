"""
Key serialization.

Keys are stored as JSON objects whose integer fields are decimal strings.
Loading a private key re-derives it from (p, q) and checks every stored
field against the derivation.
"""

import json
import os
from dataclasses import fields
from typing import Any, Dict, Optional, Tuple

from ..crypto.exceptions import KeyFormatError, KeyGenerationError
from ..crypto.keys import KeyPair, PrivateKey, PublicKey

PUBLIC_KEY_KIND = 'paillier-public-key'
PRIVATE_KEY_KIND = 'paillier-private-key'

PUBLIC_FIELDS = ('n', 'n_sq')
PRIVATE_FIELDS = tuple(f.name for f in fields(PrivateKey))


def int_to_bytes(value: int, length: Optional[int] = None) -> bytes:
    """
    Encode a non-negative integer as big-endian bytes.

    Args:
        value: Integer to encode
        length: Output length; the minimal length when omitted

    Raises:
        ValueError: if value is negative or does not fit in length bytes
    """
    if value < 0:
        raise ValueError("cannot encode a negative integer")
    if length is None:
        length = max(1, (value.bit_length() + 7) // 8)
    try:
        return value.to_bytes(length, 'big')
    except OverflowError as exc:
        raise ValueError(f"{value.bit_length()}-bit integer does not fit in {length} bytes") from exc


def int_from_bytes(data: bytes) -> int:
    """Decode big-endian bytes into a non-negative integer."""
    return int.from_bytes(data, 'big')


def _parse_int(data: Dict[str, Any], name: str) -> int:
    if name not in data:
        raise KeyFormatError(f"missing field '{name}'")
    value = data[name]
    if isinstance(value, bool):
        raise KeyFormatError(f"field '{name}' is not an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.isascii() and value.isdigit():
        return int(value)
    raise KeyFormatError(f"field '{name}' is not a decimal integer")


def _check_kind(data: Dict[str, Any], kind: str):
    if not isinstance(data, dict):
        raise KeyFormatError("key data must be a JSON object")
    if data.get('kind', kind) != kind:
        raise KeyFormatError(f"expected a {kind}, got {data.get('kind')}")


def public_key_to_dict(public_key: PublicKey) -> Dict[str, str]:
    data = {'kind': PUBLIC_KEY_KIND}
    data.update({name: str(getattr(public_key, name)) for name in PUBLIC_FIELDS})
    return data


def public_key_from_dict(data: Dict[str, Any]) -> PublicKey:
    _check_kind(data, PUBLIC_KEY_KIND)
    n = _parse_int(data, 'n')
    n_sq = _parse_int(data, 'n_sq')
    try:
        return PublicKey(n=n, n_sq=n_sq)
    except ValueError as exc:
        raise KeyFormatError(str(exc)) from exc


def private_key_to_dict(private_key: PrivateKey) -> Dict[str, str]:
    data = {'kind': PRIVATE_KEY_KIND}
    data.update({name: str(getattr(private_key, name)) for name in PRIVATE_FIELDS})
    return data


def private_key_from_dict(data: Dict[str, Any]) -> PrivateKey:
    """
    Rebuild a private key from its dictionary form.

    Only p and q are required; any other field present must match the value
    derived from them.

    Raises:
        KeyFormatError: on missing, malformed or inconsistent fields
    """
    _check_kind(data, PRIVATE_KEY_KIND)
    p = _parse_int(data, 'p')
    q = _parse_int(data, 'q')
    try:
        private_key = PrivateKey.from_primes(p, q)
    except KeyGenerationError as exc:
        raise KeyFormatError(f"invalid primes: {exc}") from exc

    for name in PRIVATE_FIELDS:
        if name in data and _parse_int(data, name) != getattr(private_key, name):
            raise KeyFormatError(f"field '{name}' is inconsistent with p and q")
    return private_key


def _write_json(path: str, data: Dict[str, Any]):
    with open(path, 'w') as f:
        json.dump(data, f, indent=2)


def _read_json(path: str) -> Dict[str, Any]:
    try:
        with open(path, 'r') as f:
            return json.load(f)
    except json.JSONDecodeError as exc:
        raise KeyFormatError(f"{path} is not valid JSON: {exc}") from exc


def save_key_pair(key_pair: KeyPair, directory: str, name: str = 'paillier') -> Tuple[str, str]:
    """
    Write a key pair as `<name>.pub.json` and `<name>.key.json`.

    Returns:
        Paths of the public and private key files
    """
    os.makedirs(directory, exist_ok=True)
    public_path = os.path.join(directory, f'{name}.pub.json')
    private_path = os.path.join(directory, f'{name}.key.json')

    _write_json(public_path, public_key_to_dict(key_pair.public_key))
    _write_json(private_path, private_key_to_dict(key_pair.private_key))
    os.chmod(private_path, 0o600)
    return public_path, private_path


def load_public_key(path: str) -> PublicKey:
    return public_key_from_dict(_read_json(path))


def load_private_key(path: str) -> PrivateKey:
    return private_key_from_dict(_read_json(path))
