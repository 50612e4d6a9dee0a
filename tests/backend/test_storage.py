import json
import logging

import pytest

from backend.storage import FileStore, StoreWriteError


def test_load_returns_empty_list_when_file_is_missing(tmp_path, caplog) -> None:
    store = FileStore(tmp_path)

    with caplog.at_level(logging.WARNING, logger='backend.storage'):
        records = store.load('professors.json')

    assert records == []
    assert 'does not exist' in caplog.text


def test_load_returns_empty_list_for_malformed_json(tmp_path) -> None:
    (tmp_path / 'professors.json').write_text('[{"id": "p1",', encoding='utf-8')

    assert FileStore(tmp_path).load('professors.json') == []


def test_load_returns_empty_list_when_document_is_not_an_array(tmp_path) -> None:
    (tmp_path / 'professors.json').write_text('{"id": "p1"}', encoding='utf-8')

    assert FileStore(tmp_path).load('professors.json') == []


def test_save_writes_two_space_indented_array(tmp_path) -> None:
    store = FileStore(tmp_path / 'input')
    records = [{'id': 'p1', 'name': 'Ada'}]

    store.save('professors.json', records)

    written = (tmp_path / 'input' / 'professors.json').read_text(encoding='utf-8')
    assert written == json.dumps(records, indent=2)
    assert store.load('professors.json') == records


def test_save_raises_store_write_error_when_directory_cannot_be_created(tmp_path) -> None:
    blocked = tmp_path / 'blocked'
    blocked.write_text('not a directory', encoding='utf-8')

    with pytest.raises(StoreWriteError):
        FileStore(blocked).save('professors.json', [])


@pytest.mark.parametrize('name', ['', '..', '../Admin.json', 'nested/professors.json', 'nested\\professors.json'])
def test_collection_names_cannot_leave_data_directory(tmp_path, name: str) -> None:
    with pytest.raises(ValueError):
        FileStore(tmp_path).load(name)


def test_load_returns_empty_list_for_invalid_utf8(tmp_path, caplog) -> None:
    (tmp_path / 'professors.json').write_bytes(b'[{"id": "\xff\xfe"}]')

    with caplog.at_level(logging.ERROR, logger='backend.storage'):
        records = FileStore(tmp_path).load('professors.json')

    assert records == []
    assert 'Error reading JSON' in caplog.text


def test_load_returns_empty_list_when_file_cannot_be_read(tmp_path) -> None:
    (tmp_path / 'professors.json').mkdir()

    assert FileStore(tmp_path).load('professors.json') == []
