# rc2qt/utils/output_files.py
import os

QRC_FILE_NAME = "resources.qrc"
SHIM_FILE_NAME = "qtmfc_resources.cpp"
UI_FILE_EXTENSION = ".ui"


class OutputWriteError(OSError):
    """Custom exception for output files or directories that cannot be created."""
    pass


def ensure_output_dir(output_dir: str) -> str:
    """Creates the output directory if needed and returns its absolute path."""
    try:
        os.makedirs(output_dir, exist_ok=True)
    except OSError as e:
        raise OutputWriteError(f"Cannot create output directory '{output_dir}': {e}") from e
    return os.path.abspath(output_dir)


def write_text_file(output_path: str, text: str):
    """
    Writes a generated artifact as UTF-8 with '\\n' line endings on every platform,
    so repeated runs over the same input give byte-identical files.
    """
    try:
        with open(output_path, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
    except OSError as e:
        raise OutputWriteError(f"Cannot write '{output_path}': {e}") from e


def ui_file_name(dialog_id: str) -> str:
    return f"{dialog_id}{UI_FILE_EXTENSION}"
