"""
Render the objects an AppsodyApplication CR should own as a yaml stream
"""
# Standard
from typing import List, Optional, TextIO
import argparse
import sys

# Third Party
import yaml

# First Party
import alog

# Local
from .. import constants
from ..application import AppsodyApplication
from ..desired_state import build_desired_state, index_objects
from ..exceptions import AppsodyError, ConfigError
from .base import CmdBase

log = alog.use_channel("MAIN")

STDIN_PATH = "-"


class RenderCmd(CmdBase):
    __doc__ = __doc__

    ## Interface ##

    def add_subparser(
        self,
        subparsers: argparse._SubParsersAction,
    ) -> argparse.ArgumentParser:
        parser = subparsers.add_parser("render", help=__doc__)
        render_args = parser.add_argument_group("Render Configuration")
        render_args.add_argument(
            "--cr",
            "-c",
            required=True,
            help=f"Path to the CR manifest yaml ('{STDIN_PATH}' for stdin)",
        )
        render_args.add_argument(
            "--existing",
            "-e",
            default=None,
            help="Path to a yaml stream of live objects to customize in place",
        )
        render_args.add_argument(
            "--output",
            "-o",
            default=None,
            help="Path to write the rendered yaml to (default is stdout)",
        )
        return parser

    def cmd(self, args: argparse.Namespace) -> int:
        try:
            cr_manifest = self._load_cr(args.cr)
            existing = index_objects(self._load_existing(args.existing))
            app = AppsodyApplication(cr_manifest)
            objects = build_desired_state(app, existing)
        except AppsodyError as err:
            log.error("Unable to render %s: %s", args.cr, err)
            return 1

        log.info("Rendered %d objects for %s", len(objects), app)
        if args.output:
            with open(args.output, "w", encoding="utf-8") as handle:
                self._dump(objects, handle)
        else:
            self._dump(objects, sys.stdout)
        return 0

    ## Implementation ##

    @staticmethod
    def _load_cr(path: str) -> dict:
        if path == STDIN_PATH:
            cr_manifest = yaml.safe_load(sys.stdin)
        else:
            with open(path, encoding="utf-8") as handle:
                cr_manifest = yaml.safe_load(handle)
        if not isinstance(cr_manifest, dict):
            raise ConfigError(f"No CR manifest found in {path}")
        if cr_manifest.get("kind") != constants.CR_KIND:
            log.warning(
                "Rendering a [%s] as an %s", cr_manifest.get("kind"), constants.CR_KIND
            )
        return cr_manifest

    @staticmethod
    def _load_existing(path: Optional[str]) -> List[dict]:
        if path is None:
            return []
        with open(path, encoding="utf-8") as handle:
            return [obj for obj in yaml.safe_load_all(handle) if obj]

    @staticmethod
    def _dump(objects: List[dict], stream: TextIO):
        yaml.safe_dump_all(objects, stream, default_flow_style=False)
