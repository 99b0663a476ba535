r'''
.------..------..------..------.
|d.--. ||g.--. ||e.--. ||n.--. |
| :/\: || :/\: || (\/) || :(): |
| (__) || :\/: || :\/: || ()() |
| '--'d|| '--'g|| '--'e|| '--'n|
`------'`------'`------'`------'
'''

import numpy as np
from faker import Faker
from sliq import from_iterable, Enumerable
from typing import Any, Dict, List, Optional, Tuple


class Generator:
    """schema interpreter and nested-shape builder for test data."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
            self._rng = np.random.default_rng(seed)
        else:
            self._rng = np.random.default_rng()

    def _resolve_faker_method(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        try:
            method = getattr(self._fake, method_name)
        except AttributeError:
            raise ValueError(f"faker has no provider '{method_name}'")
        return method(**(kwargs or {}))

    def _resolve_provider(self, config: Dict, context: Dict) -> Any:
        provider = config["_qen_provider"]
        if provider == "ref":
            key = config["key"]
            if key not in context:
                raise ValueError(f"reference to '{key}' not found in current context.")
            return context[key]

        elif provider == "choice":
            # numpy returns its own scalar types, tests want native values
            choice_result = self._rng.choice(config["from"])
            return choice_result.item() if hasattr(choice_result, 'item') else choice_result

        elif provider == "int":
            return int(self._rng.integers(config.get("min", 0), config.get("max", 100), endpoint=True))

        elif provider == "literal":
            if "value" not in config:
                raise ValueError("_qen_provider 'literal' requires a 'value' key.")
            return config["value"]

        else:
            raise ValueError(f"unknown _qen_provider: '{provider}'")

    def create(self, schema: Any, context: Optional[Dict] = None) -> Any:
        current_context = context or {}

        if isinstance(schema, dict):
            if "_qen_provider" in schema:
                return self._resolve_provider(schema, current_context)

            # fields can reference siblings generated before them
            generated_obj = {}
            for k, v in schema.items():
                merged_context = {**current_context, **generated_obj}
                generated_obj[k] = self.create(v, merged_context)
            return generated_obj

        if isinstance(schema, list):
            if not schema: return []
            item_schema = schema[0]
            count = self._get_count(item_schema)
            actual_item_schema = item_schema.get('_qen_items', item_schema) if isinstance(item_schema, dict) else item_schema
            return [self.create(actual_item_schema, current_context) for _ in range(count)]

        if isinstance(schema, str):
            if hasattr(self._fake, schema):
                return self._resolve_faker_method(schema)
            return schema

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._resolve_faker_method(schema[0], schema[1])

        return schema

    def _get_count(self, item_schema: Any) -> int:
        count = 5
        if isinstance(item_schema, dict) and "_qen_count" in item_schema:
            count_config = item_schema["_qen_count"]
            if isinstance(count_config, int):
                count = count_config
            elif isinstance(count_config, (list, tuple)) and len(count_config) == 2:
                low, high = count_config
                count = int(self._rng.integers(low, high, endpoint=True))
        return count

    def nested(self, max_depth: int, width: Tuple[int, int] = (0, 4),
               leaf_range: Tuple[int, int] = (0, 99)) -> List[Any]:
        """
        a randomly shaped nested list of ints, at most max_depth levels below the
        top level. siblings get independent depths, so shapes are irregular.
        """
        def build(depth: int) -> List[Any]:
            result = []
            for _ in range(int(self._rng.integers(width[0], width[1], endpoint=True))):
                if depth < max_depth and self._rng.random() < 0.5:
                    result.append(build(depth + 1))
                else:
                    result.append(int(self._rng.integers(leaf_range[0], leaf_range[1], endpoint=True)))
            return result

        return build(0)


class _SchemaProvider:
    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def take(self, count: int) -> Enumerable:
        return from_iterable([self._generator.create(self._schema) for _ in range(count)])


class _ShapeProvider:
    def __init__(self, max_depth: int, seed: Optional[int] = None):
        self._max_depth = max_depth
        self._generator = Generator(seed)

    def take(self, count: int) -> Enumerable:
        return from_iterable([self._generator.nested(self._max_depth) for _ in range(count)])


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)


def nested_shapes(max_depth: int = 4, seed: Optional[int] = None) -> _ShapeProvider:
    """provider of irregularly nested int lists, for flattening tests"""
    return _ShapeProvider(max_depth, seed)
