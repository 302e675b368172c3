#!/usr/bin/env python3
"""
KUBETINT CLI - YAML Viewer & Screen Dumps
-----------------------------------------
Orchestrates:
1. 'view'  - colorize a manifest (optionally highlighting a search)
2. 'save'  - persist the raw manifest as a timestamped screen dump
3. 'dumps' - list saved screen dumps

Author: KubeTint Team
Date: 2026-10-19
"""

import io
import sys
import argparse
import logging
from pathlib import Path
from typing import List, Optional

from kubetint.cli.formatter import TintFormatter
from kubetint.config.settings import Settings, load_settings
from kubetint.core.errors import InputError, KubeTintError
from kubetint.io.snapshot import SnapshotWriter, list_snapshots
from kubetint.view.colorizer import colorize_yaml
from kubetint.view.search import mark_search_regions

logger = logging.getLogger("kubetint.cli")

STDIN_MARKER = "-"

class KubeTintCLI:
    """
    CLI wrapper that translates user commands into colorizer and snapshot actions.
    """

    def __init__(self, formatter: TintFormatter = None):
        """Initializes the CLI and sets up the argument parser."""
        self.formatter = formatter or TintFormatter()
        self.parser = argparse.ArgumentParser(
            prog="kubetint",
            description="KubeTint - Kubernetes YAML Colorizer & Screen Dumps",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        self._setup_args()

    def _setup_args(self):
        """Configures the command-line flags and subcommands."""
        self.parser.add_argument("--version", action="version", version="kubetint v1.0.0")
        self.parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
        self.parser.add_argument("--config", type=Path, help="Settings file (default: $KUBETINT_CONFIG or XDG config)")
        subparsers = self.parser.add_subparsers(dest="command", metavar="Command")

        # 'view' subcommand - colorized preview
        view_parser = subparsers.add_parser("view", help="🎨 Colorize a YAML manifest")
        view_parser.add_argument("path", help="YAML file, or '-' for stdin")
        view_parser.add_argument("-s", "--search", help="Highlight matches (case-insensitive regex)")
        view_parser.add_argument("--skin", type=Path, help="k9s skin file supplying the YAML colors")
        view_parser.add_argument("--markup", action="store_true", help="Print raw viewer markup instead of rendering")

        # 'save' subcommand - screen dump
        save_parser = subparsers.add_parser("save", help="💾 Save a timestamped snapshot of a manifest")
        save_parser.add_argument("path", help="YAML file, or '-' for stdin")
        save_parser.add_argument("-n", "--name", help="Snapshot name (default: file stem)")
        save_parser.add_argument("-d", "--dir", type=Path, help="Target directory (default: configured dump dir)")

        # 'dumps' subcommand - listing
        dumps_parser = subparsers.add_parser("dumps", help="📂 List saved snapshots")
        dumps_parser.add_argument("-d", "--dir", type=Path, help="Directory to list (default: configured dump dir)")

    def _read_input(self, path: str) -> str:
        """
        Reads the input verbatim: no BOM stripping, no newline translation.
        Undecodable bytes surface as InputError.
        """
        try:
            if path == STDIN_MARKER:
                stream = io.TextIOWrapper(sys.stdin.buffer, encoding='utf-8', newline='')
                try:
                    return stream.read()
                finally:
                    stream.detach()
            with open(path, 'r', encoding='utf-8', newline='') as f:
                return f.read()
        except UnicodeDecodeError as e:
            raise InputError(f"{path} is not valid UTF-8 (byte {e.start})") from e

    def _default_name(self, path: str) -> str:
        return "stdin" if path == STDIN_MARKER else Path(path).stem

    def _clean_for_display(self, raw: str) -> str:
        """Drops a UTF-8 BOM and CRLF endings; only the on-screen copy is touched."""
        return raw.lstrip('\ufeff').replace('\r\n', '\n')

    def cmd_view(self, args: argparse.Namespace, settings: Settings) -> int:
        raw = self._clean_for_display(self._read_input(args.path))
        if args.search:
            raw, count = mark_search_regions(raw, args.search)
            self.formatter.show_search_summary(args.search, count)
        self.formatter.display_yaml(colorize_yaml(settings.style, raw), raw_markup=args.markup)
        return 0

    def cmd_save(self, args: argparse.Namespace, settings: Settings) -> int:
        raw = self._read_input(args.path)
        directory = str(args.dir or settings.dump_dir)
        name = args.name or self._default_name(args.path)

        fpath = SnapshotWriter().save(directory, name, raw)
        if not fpath:
            self.formatter.show_warning(f"Snapshot was not saved to {directory} (see log).")
            return 1
        self.formatter.show_saved(fpath)
        return 0

    def cmd_dumps(self, args: argparse.Namespace, settings: Settings) -> int:
        directory = str(args.dir or settings.dump_dir)
        self.formatter.print_snapshot_table(list_snapshots(directory), directory)
        return 0

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Primary routing entry point; returns the process exit code."""
        args = self.parser.parse_args(argv)
        logging.basicConfig(
            level=logging.DEBUG if args.verbose else logging.WARNING,
            format="%(levelname)s %(name)s: %(message)s",
        )

        if not args.command:
            self.parser.print_help()
            return 0

        handlers = {
            "view": self.cmd_view,
            "save": self.cmd_save,
            "dumps": self.cmd_dumps,
        }
        try:
            settings = load_settings(args.config, skin=getattr(args, "skin", None))
            return handlers[args.command](args, settings)
        except (KubeTintError, OSError) as e:
            logger.debug(f"Command '{args.command}' failed", exc_info=True)
            self.formatter.show_error(str(e))
            return 1

def main():
    """Application entry point with interrupt handling."""
    try:
        sys.exit(KubeTintCLI().run())
    except KeyboardInterrupt:
        TintFormatter().console.print("\n[bold red]Terminated by user.[/bold red]")
        sys.exit(130)

if __name__ == "__main__":
    main()
