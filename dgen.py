'''
.------..------..------..------.
|d.--. ||g.--. ||e.--. ||n.--. |
| :/\: || :/\: || (\/) || :(): |
| (__) || :\/: || :\/: || ()() |
| '--'d|| '--'g|| '--'e|| '--'n|
`------'`------'`------'`------'

schema driven test records for seqops.
'''

from typing import Any, Dict, Optional

import numpy as np
from faker import Faker

from seqops import Sequence, from_iterable, from_named


class Generator:
    """schema interpreter.

    a schema is any of:
        - a faker provider name ('word', 'name', ...)
        - a (provider, kwargs) tuple
        - a dict of field -> schema, generated in order so later fields can refer to earlier ones
        - a dict with '_provider' set to 'choice', 'ref', 'sequence' or 'literal'
        - anything else, returned as a literal
    """

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)

    def _faker(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        try:
            method = getattr(self._fake, method_name)
        except AttributeError:
            raise ValueError(f"faker has no provider '{method_name}'")
        return method(**(kwargs or {}))

    def _provider(self, config: Dict, context: Dict) -> Any:
        provider = config["_provider"]
        if provider == "choice":
            # numpy scalars are turned back into native python values
            picked = self._rng.choice(config["from"])
            return picked.item() if hasattr(picked, 'item') else picked

        if provider == "ref":
            key = config["key"]
            if key not in context:
                raise ValueError(f"reference to '{key}' not found in current context.")
            return context[key]

        if provider == "sequence":
            # a nested list of generated values, e.g. per-record scores
            count = config.get("count", 3)
            return [self.create(config["item"], context) for _ in range(count)]

        if provider == "literal":
            if "value" not in config:
                raise ValueError("'literal' provider requires a 'value' key.")
            return config["value"]

        raise ValueError(f"unknown _provider: '{provider}'")

    def create(self, schema: Any, context: Optional[Dict] = None) -> Any:
        current_context = context or {}

        if isinstance(schema, dict):
            if "_provider" in schema:
                return self._provider(schema, current_context)
            record = {}
            for k, v in schema.items():
                record[k] = self.create(v, {**current_context, **record})
            return record

        if isinstance(schema, str):
            return self._faker(schema) if hasattr(self._fake, schema) else schema

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._faker(schema[0], schema[1])

        return schema


class _SchemaProvider:
    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def take(self, count: int) -> Sequence:
        """an unnamed sequence of count records"""
        return from_iterable([self._generator.create(self._schema) for _ in range(count)])

    def take_named(self, count: int, name_field: str) -> Sequence:
        """a named sequence of count records, named by one of their fields (later duplicates get a suffix)"""
        named: Dict[str, Any] = {}
        for _ in range(count):
            record = self._generator.create(self._schema)
            name = str(record[name_field])
            while name in named:
                name = f"{name}_"
            named[name] = record
        return from_named(**named)


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)
