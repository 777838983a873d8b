from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from fastapi.encoders import jsonable_encoder

from .property_path_parser import PathSegment

Predicate = Callable[[Sequence[PathSegment]], bool]


@dataclass
class PartialJsonSerializer:
    by_alias: bool = True

    def serialize(self, value: Any, predicate: Predicate | None = None) -> Any:
        """
        Приводит value к JSON-совместимому виду и, если задан predicate,
        оставляет только те свойства, для которых predicate(путь) вернул True.

        Элементы массивов сами по себе не проверяются: они остаются, если
        остался массив, а в путь добавляется прозрачный сегмент-индекс.
        """
        data = jsonable_encoder(value, by_alias=self.by_alias)
        if predicate is None:
            return data
        return self._walk(data, (), predicate)

    def _walk(
        self,
        value: Any,
        path: tuple[PathSegment, ...],
        predicate: Predicate,
    ) -> Any:
        if isinstance(value, dict):
            result: dict[str, Any] = {}
            for key, item in value.items():
                item_path = (*path, PathSegment(name=str(key)))
                if predicate(item_path):
                    result[key] = self._walk(item, item_path, predicate)
            return result

        if isinstance(value, list):
            return [
                self._walk(item, (*path, PathSegment.item(index)), predicate)
                for index, item in enumerate(value)
            ]

        return value
