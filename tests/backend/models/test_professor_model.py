import pytest
from pydantic import ValidationError

from backend.models.professor import Professor

FIELDS = {'name': 'A', 'email': 'a@x.com', 'gender': 'f', 'password': 'pw'}


def test_professor_keeps_id_exactly_as_sent() -> None:
    assert Professor(id='p-1', **FIELDS).id == 'p-1'


@pytest.mark.parametrize('professor_id', ['', ' p1', 'p1 ', ' p1 ', '\tp1'])
def test_professor_rejects_blank_or_padded_id(professor_id: str) -> None:
    with pytest.raises(ValidationError):
        Professor(id=professor_id, **FIELDS)
