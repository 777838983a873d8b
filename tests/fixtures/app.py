from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from partial_json.bootstrap import create_fastapi_app


@pytest.fixture
def client() -> Iterator[TestClient]:
    app = create_fastapi_app()
    with TestClient(app) as client:
        yield client


@pytest.fixture
def document():
    return {
        'kind': 'list',
        'items': [
            {'title': 't', 'id': 1, 'extra': 'x'},
            {'title': 'u', 'id': 2, 'extra': 'y'},
        ],
    }
