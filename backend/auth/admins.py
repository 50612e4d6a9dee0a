import logging

from pydantic import ValidationError

from backend.core import config
from backend.models.admin import AdminCredential
from backend.storage import FileStore

logger = logging.getLogger(__name__)


class AdminDirectory:
    """Read-only lookup of administrator credentials loaded at start-up."""

    def __init__(self, store: FileStore, file_name: str = config.ADMIN_FILE_NAME) -> None:
        self._admins: dict[str, AdminCredential] = {}
        for raw in store.load(file_name):
            try:
                admin = AdminCredential.model_validate(raw)
            except ValidationError:
                logger.warning('Skipping malformed admin record in %s', file_name)
                continue
            self._admins[admin.user] = admin

    def find(self, user: str) -> AdminCredential | None:
        return self._admins.get(user)

    def __len__(self) -> int:
        return len(self._admins)
