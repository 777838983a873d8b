from dataclasses import dataclass
import re


@dataclass(frozen=True)
class PathSegment:
    name: str
    is_array_item: bool = False

    @classmethod
    def item(cls, index: int | str = '*') -> 'PathSegment':
        return cls(name=str(index), is_array_item=True)


class PropertyPathParser:
    _token_re = re.compile(r'^([^.\[\]]*)((?:\[(?:\d+|\*)\])*)$')
    _index_re = re.compile(r'\[(\d+|\*)\]')

    @staticmethod
    def parse_property_path(property_path: str) -> list[PathSegment]:
        """
        Поддерживаем только:
        - пути вида: foo.bar или $.foo.bar
        - индексы массивов: items[0].title, items[*].title, [0].name
        - без фильтров, без '..', без [?()], без ['name']
        """
        path = property_path.strip()
        if path.startswith('$'):
            path = path[1:]
            if path.startswith('.'):
                path = path[1:]
        if not path:
            return []

        segments: list[PathSegment] = []

        for position, raw in enumerate(path.split('.')):
            raw = raw.strip()
            if not raw:
                raise ValueError(f'Empty path segment in {property_path!r}')

            m = PropertyPathParser._token_re.match(raw)
            if not m:
                raise ValueError(f'Unsupported property path segment: {raw!r}')

            name, indexes = m.group(1), m.group(2)
            if name:
                segments.append(PathSegment(name=name))
            elif position > 0:
                # индекс без имени допустим только в начале пути: [0].name
                raise ValueError(f'Array index without property name: {raw!r}')

            for index in PropertyPathParser._index_re.findall(indexes):
                segments.append(PathSegment.item(index))

        return segments
