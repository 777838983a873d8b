import pytest

from partial_json.container import ContainerManager
from partial_json.services import FieldsParser

pytest_plugins = ('tests.fixtures.container', 'tests.fixtures.app')


@pytest.fixture(autouse=True)
def reset_container_after_test():
    # код до yield выполняется перед тестом
    yield
    # код после yield выполняется после теста
    ContainerManager.container = None


@pytest.fixture
def parse():
    parser = FieldsParser()

    def _parse(text: str):
        result = parser.parse(text)
        assert not result.is_error, result.error
        return result.fields

    return _parse
