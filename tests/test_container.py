import pytest

from partial_json.services import (
    FieldsParser,
    PartialJsonResultExecutor,
    PartialJsonSerializer,
)
from partial_json.settings import settings


@pytest.mark.asyncio
async def test_fields_parser_uses_settings(fields_parser: FieldsParser):
    assert fields_parser.max_depth == settings.partial_json.max_depth
    result = fields_parser.parse('a/b')
    assert result.fields.format() == 'a(b)'


@pytest.mark.asyncio
async def test_result_executor_is_wired(
    result_executor: PartialJsonResultExecutor,
    partial_serializer: PartialJsonSerializer,
):
    assert result_executor.options is settings.partial_json
    assert result_executor.serializer is partial_serializer


@pytest.mark.asyncio
async def test_app_scope_is_shared(container):
    first = await container.get(FieldsParser)
    second = await container.get(FieldsParser)
    assert first is second
