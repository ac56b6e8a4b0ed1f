from pathlib import Path

from delete_rest.models import ProcessError
from delete_rest.utils.error_handler import ErrorHandler


def test_error_handler_collects_and_summarizes() -> None:
    handler = ErrorHandler()
    assert handler.has_errors() is False
    assert handler.summary() == "No errors"

    handler.add(ProcessError.from_exception("W-COPY", OSError("Disk full"), Path("/photos/IMG_0017.jpg")))
    handler.add_warning("W-CONFIG", "broken config skipped", file_path="config.yaml")

    assert handler.has_errors() is True
    summary = handler.summary().splitlines()
    assert summary[0] == "2 errors occurred"
    assert summary[1] == f"  [W-COPY] {Path('/photos/IMG_0017.jpg')}: Disk full"
    assert summary[2] == "  [W-CONFIG] config.yaml: broken config skipped"


def test_from_exception_uses_class_name_for_empty_message() -> None:
    error = ProcessError.from_exception("W-DELETE", PermissionError())

    assert error.message == "PermissionError"
    assert error.file_path is None
    assert str(error) == "[W-DELETE] PermissionError"
