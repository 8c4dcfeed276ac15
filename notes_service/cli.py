"""
Notes Service — Command Line Entry Point
==========================================

What:  Parses the startup parameters and runs the server under uvicorn.
How:   argparse collects host, port and storage directory; they become a
       Settings instance, which configures the app built by create_app().

Usage:
    notes-service -h 127.0.0.1 -p 8000 -c ./cache
    python -m notes_service --host 0.0.0.0 --port 8080 --cache /var/lib/notes

-h is the host (not help); use --help for usage.
"""

import argparse
from typing import List, Optional

import uvicorn
from pydantic import ValidationError as SettingsValidationError

from notes_service.config import Settings
from notes_service.main import create_app, setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="notes-service",
        description="Serve plain-text notes stored as files in a directory.",
        add_help=False,
    )
    parser.add_argument("--help", action="help", help="Show this message and exit")
    parser.add_argument("-h", "--host", required=True, help="Server host")
    parser.add_argument("-p", "--port", required=True, type=int, help="Server port")
    parser.add_argument(
        "-c", "--cache", required=True, help="Path to the notes storage directory"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="DEBUG, INFO, WARNING, ERROR or CRITICAL (default: INFO)",
    )
    parser.add_argument(
        "--upload-form",
        default=None,
        help="HTML file served at /UploadForm.html (default: packaged form)",
    )
    return parser


def settings_from_args(args: argparse.Namespace) -> Settings:
    """
    Turn parsed arguments into Settings.

    Arguments left unset fall back to NOTES_* environment variables and then
    to the Settings defaults.
    """
    overrides = {"host": args.host, "port": args.port, "cache_dir": args.cache}
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    if args.upload_form is not None:
        overrides["upload_form_path"] = args.upload_form
    return Settings(**overrides)


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        cfg = settings_from_args(args)
    except SettingsValidationError as e:
        parser.error(str(e))

    setup_logging(cfg.log_level)
    app = create_app(cfg)
    uvicorn.run(app, host=cfg.host, port=cfg.port, log_level=cfg.log_level.lower())


if __name__ == "__main__":
    main()
