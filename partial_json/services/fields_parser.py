from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from partial_json.exceptions import ConfigurationError, FieldsSyntaxError

_PUNCTUATION = {',': 'COMMA', '(': 'LPAREN', ')': 'RPAREN', '/': 'SLASH'}

_UNEXPECTED = {
    'COMMA': "Expected field name before ','",
    'LPAREN': "'(' must be preceded by a field name",
    'RPAREN': "Unexpected ')'",
    'SLASH': "'/' must be preceded by a field name",
    'END': 'Expected field name',
}

Token = tuple[str, str, int]


@dataclass(frozen=True, eq=False)
class Selection:
    """
    Разобранный селектор полей.

    entries      -> {имя поля: вложенный Selection}, пустой Selection = поле целиком
    has_wildcard -> на этом уровне был '*', всё неупомянутое включается

    Пустой Selection (нет entries, нет '*') означает "фильтрация не запрошена".
    """

    entries: Mapping[str, Selection] = field(default_factory=dict)
    has_wildcard: bool = False
    _folded: Mapping[str, Selection] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, 'entries', MappingProxyType(dict(self.entries)))

        # индекс для поиска без учёта регистра, исходные ключи не трогаем
        folded: dict[str, Selection] = {}
        for name, sub in self.entries.items():
            key = name.casefold()
            folded[key] = folded[key].merge(sub) if key in folded else sub
        object.__setattr__(self, '_folded', MappingProxyType(folded))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Selection):
            return NotImplemented
        return (
            self.has_wildcard == other.has_wildcard
            and dict(self.entries) == dict(other.entries)
        )

    @property
    def is_empty(self) -> bool:
        return not self.entries and not self.has_wildcard

    def lookup(self, name: str, ignore_case: bool = False) -> Selection | None:
        if ignore_case:
            return self._folded.get(name.casefold())
        return self.entries.get(name)

    def merge(self, other: Selection) -> Selection:
        # поле без уточнений выбрано целиком и поглощает любые уточнения
        if self.is_empty or other.is_empty:
            return Selection()

        entries = dict(self.entries)
        for name, sub in other.entries.items():
            entries[name] = entries[name].merge(sub) if name in entries else sub
        return Selection(entries, self.has_wildcard or other.has_wildcard)

    def format(self) -> str:
        parts = [
            name if sub.is_empty else f'{name}({sub.format()})'
            for name, sub in self.entries.items()
        ]
        if self.has_wildcard:
            parts.append('*')
        return ','.join(parts)

    def to_dict(self) -> dict[str, Any]:
        tree: dict[str, Any] = {
            name: sub.to_dict() for name, sub in self.entries.items()
        }
        if self.has_wildcard:
            tree['*'] = {}
        return tree


@dataclass(frozen=True)
class FieldsResult:
    fields: Selection | None = None
    error: FieldsSyntaxError | None = None

    @classmethod
    def present(cls, selection: Selection) -> FieldsResult:
        return cls(fields=selection)

    @classmethod
    def absent(cls) -> FieldsResult:
        return cls()

    @classmethod
    def failure(cls, error: FieldsSyntaxError) -> FieldsResult:
        return cls(error=error)

    @property
    def is_present(self) -> bool:
        return self.fields is not None or self.error is not None

    @property
    def is_error(self) -> bool:
        return self.error is not None


class _SelectionBuilder:
    __slots__ = ('entries', 'has_wildcard', 'is_leaf')

    def __init__(self) -> None:
        self.entries: dict[str, _SelectionBuilder] = {}
        self.has_wildcard = False
        self.is_leaf = False

    def child(self, name: str) -> _SelectionBuilder:
        node = self.entries.get(name)
        if node is None:
            node = self.entries[name] = _SelectionBuilder()
        return node

    def build(self) -> Selection:
        if self.is_leaf:
            return Selection()
        return Selection(
            {name: node.build() for name, node in self.entries.items()},
            self.has_wildcard,
        )


class FieldsParser:
    def __init__(self, max_depth: int | None = None):
        if max_depth is not None and max_depth < 0:
            raise ConfigurationError('max_depth must be a non-negative integer or None')
        self.max_depth = max_depth

    def parse(self, text: str) -> FieldsResult:
        """
        Принимает строку вида:

            kind,items(title,id)
            a/b/c,a(d),*

        и возвращает FieldsResult с деревом Selection либо с первой
        синтаксической ошибкой. Для обычного некорректного ввода не бросает.
        """
        if not isinstance(text, str):
            raise ConfigurationError(
                f'Selector must be a string, got {type(text).__name__}'
            )

        try:
            selection = self._parse_tokens(self._tokenize(text))
        except FieldsSyntaxError as e:
            return FieldsResult.failure(e)
        except RecursionError:
            return FieldsResult.failure(
                FieldsSyntaxError('Selector is nested too deeply', 0)
            )
        return FieldsResult.present(selection)

    def parse_optional(self, text: str | None) -> FieldsResult:
        if text is None:
            return FieldsResult.absent()
        return self.parse(text)

    @staticmethod
    def _tokenize(s: str) -> list[Token]:
        tokens: list[Token] = []
        i = 0
        n = len(s)

        while i < n:
            ch = s[i]
            if ch in _PUNCTUATION:
                tokens.append((_PUNCTUATION[ch], ch, i))
                i += 1
                continue

            j = i
            while j < n and s[j] not in _PUNCTUATION:
                j += 1
            raw = s[i:j]
            name = raw.strip()
            if name:
                start = i + len(raw) - len(raw.lstrip())
                tokens.append(('WILDCARD' if name == '*' else 'NAME', name, start))
            i = j

        tokens.append(('END', '', n))
        return tokens

    def _parse_tokens(self, tokens: list[Token]) -> Selection:
        def check_depth(depth: int, position: int) -> None:
            if self.max_depth is not None and depth > self.max_depth:
                raise FieldsSyntaxError(
                    f'Selector nesting exceeds maximum depth of {self.max_depth}',
                    position,
                )

        def parse_group(node: _SelectionBuilder, p: int, depth: int) -> int:
            p = parse_item(node, p, depth)
            while tokens[p][0] == 'COMMA':
                p = parse_item(node, p + 1, depth)
            return p

        def parse_item(node: _SelectionBuilder, p: int, depth: int) -> int:
            kind, value, position = tokens[p]

            if kind == 'WILDCARD':
                node.has_wildcard = True
                next_kind, _, next_position = tokens[p + 1]
                if next_kind in ('LPAREN', 'SLASH'):
                    raise FieldsSyntaxError(
                        'Wildcard cannot have a sub-selection', next_position
                    )
                return p + 1

            if kind != 'NAME':
                raise FieldsSyntaxError(_UNEXPECTED[kind], position)

            child = node.child(value)
            p += 1
            kind, _, position = tokens[p]

            if kind == 'SLASH':
                check_depth(depth + 1, position)
                next_kind, _, next_position = tokens[p + 1]
                if next_kind not in ('NAME', 'WILDCARD'):
                    raise FieldsSyntaxError(
                        "Expected field name after '/'", next_position
                    )
                return parse_item(child, p + 1, depth + 1)

            if kind == 'LPAREN':
                check_depth(depth + 1, position)
                if tokens[p + 1][0] == 'RPAREN':
                    raise FieldsSyntaxError('Empty group', tokens[p + 1][2])
                p = parse_group(child, p + 1, depth + 1)
                kind, _, position = tokens[p]
                if kind == 'END':
                    raise FieldsSyntaxError("Missing ')'", position)
                if kind != 'RPAREN':
                    raise FieldsSyntaxError("Expected ',' or ')'", position)
                return p + 1

            child.is_leaf = True
            return p

        if tokens[0][0] == 'END':
            return Selection()

        root = _SelectionBuilder()
        p = parse_group(root, 0, 0)
        kind, _, position = tokens[p]
        if kind == 'RPAREN':
            raise FieldsSyntaxError("Unexpected ')'", position)
        if kind != 'END':
            raise FieldsSyntaxError("Expected ',' or end of selector", position)
        return root.build()
