"""Command-line entry point for build hooks that are not written in Python.

Usage:
    scaffold-bridge generate src/example.udl
    scaffold-bridge generate src/example.udl --out-dir build/gen --report build/gen/report.cbor
"""

from __future__ import annotations

import argparse
import dataclasses
import sys
from collections.abc import Sequence
from pathlib import Path

from scaffold_bridge.bridge import ScaffoldingBridge
from scaffold_bridge.config import BridgeConfig
from scaffold_bridge.errors import ScaffoldBridgeError


def cmd_generate(args: argparse.Namespace) -> int:
    config = _config_from_args(args)
    bridge = ScaffoldingBridge.from_config(config)
    try:
        result = bridge.generate(args.interface_file, config.out_dir)
    except ScaffoldBridgeError as exc:
        print(f"error[{exc.code}]: {exc}", file=sys.stderr)
        return 1
    finally:
        if args.log is not None:
            bridge.logger.to_json_lines(args.log)

    if args.report is not None:
        report_path = Path(args.report)
        report_path.parent.mkdir(parents=True, exist_ok=True)
        if report_path.suffix == ".cbor":
            result.to_cbor(report_path)
        else:
            result.to_json(report_path)
    return 0


def _config_from_args(args: argparse.Namespace) -> BridgeConfig:
    config = BridgeConfig.from_env()
    overrides: dict[str, object] = {
        "version_policy": args.version_policy,
    }
    if args.out_dir is not None:
        overrides["out_dir"] = Path(args.out_dir)
    if args.builtin_bindgen:
        overrides["strategy"] = "inprocess"
    if args.bindgen is not None:
        overrides["executable"] = args.bindgen
    if args.generator is not None:
        overrides["generator"] = args.generator
    if args.timeout is not None:
        overrides["timeout"] = args.timeout
    if args.require_version is not None:
        overrides["required_version"] = args.require_version
    return dataclasses.replace(config, **overrides)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scaffold-bridge",
        description="Generate FFI scaffolding for an interface-definition file",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    gen_p = sub.add_parser("generate", help="Write <stem>.uniffi.rs into the output directory")
    gen_p.add_argument("interface_file", help="Interface-definition file")
    gen_p.add_argument("--out-dir", help="Output directory (default: $OUT_DIR)")
    gen_p.add_argument(
        "--builtin-bindgen",
        action="store_true",
        help="Call the generator library in-process instead of the executable",
    )
    gen_p.add_argument("--bindgen", help="Generator executable name or path")
    gen_p.add_argument("--generator", help="In-process generator as module:function")
    gen_p.add_argument("--timeout", type=float, help="Seconds to wait for the generator")
    gen_p.add_argument("--require-version", help="Expected generator version")
    gen_p.add_argument(
        "--version-policy",
        choices=("warn", "error", "allow"),
        default="warn",
        help="What to do when the generator version does not match",
    )
    gen_p.add_argument("--report", help="Write a JSON (or .cbor) result report")
    gen_p.add_argument("--log", help="Write structured log records as JSON lines")
    gen_p.set_defaults(func=cmd_generate)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
