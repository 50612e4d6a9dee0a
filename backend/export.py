"""Excel export of the professor collection."""
import logging
from io import BytesIO
from pathlib import Path
from urllib.parse import quote

from openpyxl import Workbook
from openpyxl.utils import get_column_letter

from backend.core import config
from backend.models.professor import Professor

logger = logging.getLogger(__name__)

XLSX_MEDIA_TYPE = 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'
SHEET_TITLE = 'Professors'

# (header, attribute, column width). Passwords are never exported.
COLUMNS: list[tuple[str, str, int]] = [
    ('ID', 'id', 10),
    ('Name', 'name', 30),
    ('Email', 'email', 30),
    ('Gender', 'gender', 15),
]


def build_workbook(professors: list[Professor]) -> Workbook:
    workbook = Workbook()
    worksheet = workbook.active
    worksheet.title = SHEET_TITLE

    worksheet.append([header for header, _, _ in COLUMNS])
    for index, (_, _, width) in enumerate(COLUMNS, start=1):
        worksheet.column_dimensions[get_column_letter(index)].width = width

    for professor in professors:
        worksheet.append([getattr(professor, attribute) for _, attribute, _ in COLUMNS])

    return workbook


def check_file_name(file_name: str) -> None:
    if not file_name or Path(file_name).name != file_name or any(ord(char) < 32 for char in file_name):
        raise ValueError(f'Invalid file name: {file_name!r}')


def content_disposition(file_name: str) -> str:
    """Attachment header value; the name is percent-encoded so any character is header safe."""
    check_file_name(file_name)
    return f"attachment; filename*=UTF-8''{quote(f'{file_name}.xlsx', safe='')}"


class ProfessorExporter:
    def __init__(self, export_dir: Path | str | None = None) -> None:
        self.export_dir = Path(export_dir) if export_dir is not None else config.EXPORT_DIR

    def to_bytes(self, professors: list[Professor]) -> bytes:
        buffer = BytesIO()
        build_workbook(professors).save(buffer)
        return buffer.getvalue()

    def resolve_path(self, file_name: str, location: str) -> Path:
        """Return the absolute target path, refusing anything outside the export directory."""
        check_file_name(file_name)

        root = self.export_dir.resolve()
        target = (root / location / f'{file_name}.xlsx').resolve()
        if not target.is_relative_to(root):
            raise ValueError(f'Export location escapes the export directory: {location!r}')
        return target

    def write(self, professors: list[Professor], file_name: str, location: str) -> Path:
        target = self.resolve_path(file_name, location)
        target.parent.mkdir(parents=True, exist_ok=True)
        build_workbook(professors).save(target)
        logger.info('Exported %d professors to %s', len(professors), target)
        return target
