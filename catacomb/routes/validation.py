"""Lightweight request payload validation utilities.

Provides minimal schema-like checking with clear, consistent error responses
for the JSON endpoints.

Schema Mini-Language (Python dict):
{
  'field_name': ('type', required: bool, extras: dict)
}
Supported types: 'str', 'int', 'seed' (int or str)
Extras examples:
  min, max (for int)
  max_len, min_len (for str and seed strings)

Example:
 ok, data_or_err = validate({'room_num': 12}, GENERATE_REQUEST)

If invalid: (False, {'field': 'room_num', 'error': 'must be >= 1', 'code': 'min'})
If valid: (True, normalized_data)
"""
from __future__ import annotations

from typing import Any, Dict, Tuple

PRIMITIVES = {
    'str': (str,),
    'int': (int,),
    'seed': (int, str),
}


def _fail(field: str, message: str, code: str) -> Tuple[bool, Dict[str, Any]]:
    return False, {'field': field, 'error': message, 'code': code}


def validate(payload: Any, schema: Dict[str, tuple]) -> Tuple[bool, Dict[str, Any]]:
    if not isinstance(payload, dict):
        return _fail('__root__', 'payload must be an object', 'type')
    out = {}
    for name, spec in schema.items():
        if not isinstance(spec, tuple) or len(spec) < 2:
            return _fail('__schema__', f'invalid spec for {name}', 'schema')
        type_name, required = spec[0], spec[1]
        extras = spec[2] if len(spec) > 2 else {}
        if type_name not in PRIMITIVES:
            return _fail('__schema__', f'unsupported type {type_name}', 'schema')
        if name not in payload or payload[name] is None:
            if required:
                return _fail(name, 'missing required field', 'required')
            continue
        value = payload[name]
        # bool is an int subclass; JSON true/false is never a valid count
        if isinstance(value, bool) or not isinstance(value, PRIMITIVES[type_name]):
            return _fail(name, f'expected {type_name}', 'type')
        if isinstance(value, int):
            if 'min' in extras and value < extras['min']:
                return _fail(name, f"must be >= {extras['min']}", 'min')
            if 'max' in extras and value > extras['max']:
                return _fail(name, f"must be <= {extras['max']}", 'max')
        else:
            s = value.strip()
            if 'max_len' in extras and len(s) > extras['max_len']:
                return _fail(name, 'too long', 'max_len')
            if 'min_len' in extras and len(s) < extras['min_len']:
                return _fail(name, 'too short', 'min_len')
            value = s
        out[name] = value
    return True, out


# Upper bounds keep a single request from allocating unbounded search grids
MAX_ROOMS = 400
MAX_RADIUS = 400

GENERATE_REQUEST = {
    'room_num': ('int', False, {'min': 1, 'max': MAX_ROOMS}),
    'radius': ('int', False, {'min': 1, 'max': MAX_RADIUS}),
    'seed': ('seed', False, {'max_len': 128}),
}
