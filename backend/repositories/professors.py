"""In-memory professor collection synchronized to the file store.

The repository is built once when the application starts and is the single
owner of the professor list. Every mutation is flushed to disk before it is
reported as done; if the write fails the in-memory change is undone and the
``StoreWriteError`` propagates to the caller.
"""
import logging

from pydantic import ValidationError

from backend.core import config
from backend.models.professor import Professor, ProfessorUpdate
from backend.storage import FileStore, StoreWriteError

logger = logging.getLogger(__name__)


class RepositoryError(Exception):
    """Base class for professor repository failures."""


class DuplicateKey(RepositoryError):
    def __init__(self, professor_ids: list[str]):
        self.professor_ids = professor_ids
        super().__init__(f"Professor ID already exists: {', '.join(professor_ids)}")


class DuplicateInBatch(RepositoryError):
    def __init__(self, professor_ids: list[str]):
        self.professor_ids = professor_ids
        super().__init__(f"Duplicate IDs found in upload data: {', '.join(professor_ids)}")


class NotFound(RepositoryError):
    def __init__(self, professor_id: str):
        self.professor_id = professor_id
        super().__init__(f'Professor not found: {professor_id}')


class ProfessorRepository:
    def __init__(self, store: FileStore, file_name: str = config.PROFESSORS_FILE_NAME) -> None:
        self.store = store
        self.file_name = file_name
        self._professors: list[Professor] = self._load()

    def _load(self) -> list[Professor]:
        professors: list[Professor] = []
        for raw in self.store.load(self.file_name):
            try:
                professors.append(Professor.model_validate(raw))
            except ValidationError:
                logger.warning('Skipping malformed professor record in %s: %r', self.file_name, raw)
        logger.info('Loaded %d professors from %s', len(professors), self.file_name)
        return professors

    def _persist(self) -> None:
        self.store.save(self.file_name, [professor.model_dump() for professor in self._professors])

    def _commit(self, previous: list[Professor]) -> None:
        try:
            self._persist()
        except StoreWriteError:
            self._professors = previous
            raise

    def _find_index(self, professor_id: str) -> int:
        for index, professor in enumerate(self._professors):
            if professor.id == professor_id:
                return index
        raise NotFound(professor_id)

    def list_all(self) -> list[Professor]:
        return [professor.model_copy() for professor in self._professors]

    def get(self, professor_id: str) -> Professor:
        return self._professors[self._find_index(professor_id)].model_copy()

    def create(self, professor: Professor) -> Professor:
        if any(existing.id == professor.id for existing in self._professors):
            raise DuplicateKey([professor.id])

        previous = list(self._professors)
        stored = professor.model_copy()
        self._professors.append(stored)
        self._commit(previous)

        return stored.model_copy()

    def update(self, professor_id: str, changes: ProfessorUpdate) -> Professor:
        index = self._find_index(professor_id)
        current = self._professors[index]

        # gender is accepted in the payload but never applied to a stored record.
        fields = {
            name: value
            for name, value in changes.model_dump(include={'name', 'email', 'password'}).items()
            if value
        }
        updated = current.model_copy(update=fields)

        previous = list(self._professors)
        self._professors[index] = updated
        self._commit(previous)

        return updated.model_copy()

    def delete(self, professor_id: str) -> None:
        index = self._find_index(professor_id)

        previous = list(self._professors)
        del self._professors[index]
        self._commit(previous)

    def bulk_create(self, professors: list[Professor]) -> int:
        incoming_ids = [professor.id for professor in professors]
        seen: set[str] = set()
        repeated: list[str] = []
        for professor_id in incoming_ids:
            if professor_id in seen and professor_id not in repeated:
                repeated.append(professor_id)
            seen.add(professor_id)
        if repeated:
            raise DuplicateInBatch(repeated)

        existing_ids = {professor.id for professor in self._professors}
        colliding = [professor_id for professor_id in incoming_ids if professor_id in existing_ids]
        if colliding:
            raise DuplicateKey(colliding)

        previous = list(self._professors)
        self._professors.extend(professor.model_copy() for professor in professors)
        self._commit(previous)

        return len(professors)
