# -*- coding: utf-8 -*-
"""
egui 样式导出工具 - 命令行入口

不打开 GUI，直接从预设或已导出的 JSON 生成 Rust 源码 / JSON。

使用方法:
    python themer.py export --preset light --format rust --eframe -o style.rs
    python themer.py export --preset dark --format json --pretty
    python themer.py convert style.json --format rust -o style.rs

选项:
    --config PATH    配置文件 (默认 themer.json，不存在时使用默认值)
    --rustfmt PATH   rustfmt 可执行文件，覆盖配置
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import settings
from presets import PRESETS, preset
from transfer import ExportFormat, ExportOptions, TransferError, export_style, import_style


logger = logging.getLogger("themer")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="themer",
        description="Export an egui style as Rust source or JSON.",
    )
    parser.add_argument("--config", default=settings.DEFAULT_CONFIG_PATH, help="配置文件路径")
    parser.add_argument("--rustfmt", help="rustfmt 可执行文件路径")
    parser.add_argument("-v", "--verbose", action="store_true", help="输出调试日志")

    sub = parser.add_subparsers(dest="command", required=True)

    def add_output_options(p: argparse.ArgumentParser) -> None:
        p.add_argument(
            "--format",
            choices=[f.value for f in ExportFormat],
            default=None,
            help="导出格式 (默认读取配置)",
        )
        p.add_argument("--eframe", action="store_true", default=None, help="加入 eframe 集成")
        p.add_argument("--pretty", action="store_true", default=None, help="缩进 JSON")
        p.add_argument("-o", "--output", help="输出文件 (默认写到 stdout)")

    export_parser = sub.add_parser("export", help="导出预设样式")
    export_parser.add_argument("--preset", choices=sorted(PRESETS), default="dark")
    add_output_options(export_parser)

    convert_parser = sub.add_parser("convert", help="导入 JSON 样式并重新导出")
    convert_parser.add_argument("input", help="JSON 样式文件")
    add_output_options(convert_parser)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    settings.load_from_file(args.config)
    if args.rustfmt:
        settings.set_rustfmt_path(args.rustfmt)

    fmt = ExportFormat(args.format or settings.get_export_format())
    options = ExportOptions(
        eframe=settings.get_eframe() if args.eframe is None else args.eframe,
        json_pretty=settings.get_json_pretty() if args.pretty is None else args.pretty,
    )
    logger.debug("command=%s format=%s %s", args.command, fmt.value, options)

    try:
        if args.command == "convert":
            style = import_style(Path(args.input).read_bytes())
        else:
            style = preset(args.preset)

        data = export_style(style, fmt, options)

        if args.output:
            Path(args.output).write_bytes(data)
            print(f"[OK] 已导出 {fmt.label}: {args.output}", file=sys.stderr)
        else:
            sys.stdout.buffer.write(data)
            sys.stdout.buffer.flush()
    except TransferError as e:
        print(f"[X] {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"[X] 文件读写失败: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
