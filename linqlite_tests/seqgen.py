'''
.------..------..------..------..------..------.
|s.--. ||e.--. ||q.--. ||g.--. ||e.--. ||n.--. |
| :/\: || (\/) || (\/) || :/\: || (\/) || :(): |
| :\/: || :\/: || :\/: || :\/: || :\/: || ()() |
| '--'s|| '--'e|| '--'q|| '--'g|| '--'e|| '--'n|
`------'`------'`------'`------'`------'`------'

schema-driven record generator for test fixtures.

a schema is a dict of field -> spec, where a spec is one of:
  'word'                               a faker provider name
  ('pyint', {'min_value': 1, ...})     a faker provider with kwargs
  {'_gen': 'choice', 'from': [...]}    a numpy-seeded pick
  {'_gen': 'ref', 'key': 'id'}         an earlier field of the same record
  {'_gen': 'literal', 'value': x}      a fixed value
  anything else                        used as-is
'''

import numpy as np
from faker import Faker
from linqlite import from_iterable, Enumerable
from typing import Any, Dict, Optional


class RecordGenerator:
    """schema interpreter."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)

    def _call_faker(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        try:
            method = getattr(self._fake, method_name)
        except AttributeError:
            raise ValueError(f"faker has no provider '{method_name}'")
        return method(**(kwargs or {}))

    def _resolve_generator(self, config: Dict, record: Dict) -> Any:
        kind = config["_gen"]
        if kind == "choice":
            picked = self._rng.choice(config["from"])
            # numpy scalars back to native python values
            return picked.item() if hasattr(picked, 'item') else picked
        if kind == "ref":
            key = config["key"]
            if key not in record:
                raise ValueError(f"reference to '{key}' not found in current record.")
            return record[key]
        if kind == "literal":
            if "value" not in config:
                raise ValueError("_gen 'literal' requires a 'value' key.")
            return config["value"]
        raise ValueError(f"unknown _gen: '{kind}'")

    def create_field(self, spec: Any, record: Dict) -> Any:
        if isinstance(spec, dict) and "_gen" in spec:
            return self._resolve_generator(spec, record)
        if isinstance(spec, tuple) and len(spec) == 2 and isinstance(spec[1], dict):
            return self._call_faker(spec[0], spec[1])
        if isinstance(spec, str) and hasattr(self._fake, spec):
            return self._call_faker(spec)
        return spec

    def create(self, schema: Dict[str, Any]) -> Dict[str, Any]:
        # fields are built in order so refs can see earlier fields
        record = {}
        for key, spec in schema.items():
            record[key] = self.create_field(spec, record)
        return record


class _SchemaProvider:
    def __init__(self, schema: Dict[str, Any], seed: Optional[int] = None):
        self._schema = schema
        self._generator = RecordGenerator(seed)

    def take(self, count: int) -> Enumerable:
        """generate 'count' records once and wrap them, so every traversal sees the same data"""
        records = [self._generator.create(self._schema) for _ in range(count)]
        return from_iterable(records)


def from_schema(schema: Dict[str, Any], seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)
