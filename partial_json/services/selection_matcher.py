from collections.abc import Callable, Sequence
from functools import lru_cache

from .fields_parser import Selection
from .property_path_parser import PathSegment, PropertyPathParser

PropertyPath = Sequence[PathSegment] | str


@lru_cache(maxsize=1024)
def _parse_cached(property_path: str) -> tuple[PathSegment, ...]:
    return tuple(PropertyPathParser.parse_property_path(property_path))


class SelectionMatcher:
    @staticmethod
    def matches(
        selection: Selection,
        path: PropertyPath,
        ignore_case: bool = False,
    ) -> bool:
        """
        Selection('kind,items(title,id)'):

            kind             -> True
            items            -> True
            items[0].title   -> True   (индексы массивов прозрачны)
            items[0].extra   -> False

        Префикс выбранного пути тоже выбран: 'a/b/c' включает 'a' и 'a.b'.
        """
        if isinstance(path, str):
            path = _parse_cached(path)

        names = [segment.name for segment in path if not segment.is_array_item]
        if not names:
            return selection.is_empty or selection.has_wildcard

        node = selection
        for name in names:
            if node.is_empty:
                return True

            sub = node.lookup(name, ignore_case)
            if sub is None:
                return node.has_wildcard
            node = sub

        return True

    @staticmethod
    def predicate(
        selection: Selection,
        ignore_case: bool = False,
    ) -> Callable[[PropertyPath], bool]:
        def _matches(path: PropertyPath) -> bool:
            return SelectionMatcher.matches(selection, path, ignore_case)

        return _matches
