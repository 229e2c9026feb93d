# rc2qt/__main__.py

import argparse
import os
import sys

from .core.line_source import RCSourceError
from .core.rc_parser import RCParser
from .core.rc_refine import refine_catalog
from .emit.qrc_writer import catalog_manifest_entries, write_qrc_file
from .emit.shim_writer import write_shim_file
from .emit.ui_writer import write_ui_file
from .utils.image_utils import check_bitmap_reference
from .utils.output_files import (
    OutputWriteError, QRC_FILE_NAME, SHIM_FILE_NAME, ensure_output_dir, ui_file_name
)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="rc2qt", description="Converts .rc files to Qt project files")
    parser.add_argument("rcfile", help="the input .rc file")
    parser.add_argument("output", help="the output directory")
    return parser


def write_outputs(catalog, output_dir: str, source_name: str):
    out_dir = ensure_output_dir(output_dir)

    qrc_path = os.path.join(out_dir, QRC_FILE_NAME)
    manifest = catalog_manifest_entries(catalog)
    write_qrc_file(manifest, qrc_path, aliases=True)
    print(f"INFO: Wrote {qrc_path} ({len(manifest)} files)")

    written = set()
    for dialog in catalog.dialogs:
        if not dialog.has_id or dialog.id in written:
            continue
        written.add(dialog.id)
        ui_path = os.path.join(out_dir, ui_file_name(dialog.id))
        write_ui_file(dialog.id, dialog.control_lines, ui_path)
        print(f"INFO: Wrote {ui_path}")

    shim_path = os.path.join(out_dir, SHIM_FILE_NAME)
    write_shim_file(catalog, shim_path, source_name)
    print(f"INFO: Wrote {shim_path}")


def main(argv=None) -> int:
    args = build_arg_parser().parse_args(argv)

    try:
        catalog = RCParser().parse_rc_file(args.rcfile)
    except RCSourceError as e:
        print(f"ERROR: {e}")
        return 1
    refine_catalog(catalog)
    print(f"INFO: Parsed {len(catalog)} resources from '{args.rcfile}'")

    for warning in catalog.warnings:
        print(f"Warning: {warning}")

    base_dir = os.path.dirname(os.path.abspath(args.rcfile))
    for resource in catalog.iter_file_resources():
        for problem in check_bitmap_reference(resource, base_dir):
            print(f"Warning: {problem}")

    try:
        write_outputs(catalog, args.output, os.path.basename(args.rcfile))
    except OutputWriteError as e:
        print(f"ERROR: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
