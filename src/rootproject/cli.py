from __future__ import annotations

import argparse
import json
import logging

logger = logging.getLogger("rootproject.cli")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="rootproject")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    sub = parser.add_subparsers(dest="cmd", required=True)

    sub.add_parser("about", help="Show basic project info.")

    init = sub.add_parser("init", help="Write the default build.json into a project folder.")
    init.add_argument("--dir", dest="project_dir", default=".", help="Root project folder (default: .)")
    init.add_argument("--force", action="store_true", help="Overwrite an existing build.json.")

    pre = sub.add_parser("precheck", help="Check build.json for configuration problems.")
    pre.add_argument("--dir", dest="project_dir", default=".", help="Root project folder (default: .)")

    conf = sub.add_parser("configure", help="Resolve output directories and evaluation order.")
    conf.add_argument("--dir", dest="project_dir", default=".", help="Root project folder (default: .)")
    conf.add_argument("--build-dir", default=None, help="Override the relocated build directory.")
    conf.add_argument("--report", default=None, help="Write the configuration as JSON to this path instead of stdout.")

    clean = sub.add_parser("clean", help="Delete the resolved root build directory.")
    clean.add_argument("--dir", dest="project_dir", default=".", help="Root project folder (default: .)")
    clean.add_argument("--build-dir", default=None, help="Override the relocated build directory.")
    return parser


def _run(args: argparse.Namespace) -> int:
    if args.cmd == "about":
        from rootproject import __version__

        print(f"rootproject {__version__}")
        return 0

    if args.cmd == "init":
        from rootproject.examples.descriptor_example import write_descriptor_example

        out = write_descriptor_example(args.project_dir, force=args.force)
        print(out)
        return 0

    if args.cmd == "precheck":
        from rootproject.app.precheck import precheck_descriptor, summarize_issues
        from rootproject.descriptor.io import read_descriptor

        issues = precheck_descriptor(read_descriptor(args.project_dir))
        for issue in issues:
            print(f"{issue.severity:5} {issue.code}: {issue.message}")
        errors, warnings, infos = summarize_issues(issues)
        print(f"errors={errors} warnings={warnings} info={infos}")
        return 1 if errors else 0

    if args.cmd == "configure":
        from pathlib import Path

        from rootproject.app.configure import configure
        from rootproject.app.report import write_configuration_report

        result = configure(args.project_dir, build_dir=args.build_dir)
        if args.report:
            print(f"Wrote report: {write_configuration_report(result, Path(args.report))}")
        else:
            print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
        return 0

    if args.cmd == "clean":
        from rootproject.app.configure import configure
        from rootproject.project.clean import clean_layout

        result = configure(args.project_dir, build_dir=args.build_dir)
        clean_layout(result.layout)
        return 0

    raise SystemExit(f"Unknown command: {args.cmd}")


def main(argv: list[str] | None = None) -> int:
    from rootproject.app.error_mapping import map_exception
    from rootproject.util.logging import configure_logging

    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else None)

    try:
        return _run(args)
    except Exception as exc:
        info = map_exception(exc)
        logger.error("[%s] %s", info.code, info.message)
        logger.debug("Traceback", exc_info=exc)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
