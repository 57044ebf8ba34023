import argparse
import json
import logging
import sys
from pathlib import Path

from config.settings import get_settings
from errors import AdopterLoadError
from models import STATUS_ORDER
from services.loader import build_site, load_adopters
from services.reporting import print_summary
from utils.logging_setup import init_logging

logger = logging.getLogger("cli")


def cmd_build(args):
    settings = get_settings()
    write_json = settings.write_json and not args.no_json
    ctx = build_site(args.adopters_dir, args.output_dir, settings=settings, write_json=write_json)
    print_summary(ctx.content(), Path(ctx.meta["page_path"]))


def cmd_validate(args):
    content = load_adopters(args.adopters_dir)
    print_summary(content)
    print(f"OK: {len(content.adopters)} adopter entries in {args.adopters_dir}")


def cmd_summary(args):
    content = load_adopters(args.adopters_dir)
    if args.json:
        print(json.dumps(content.to_payload(), indent=2, ensure_ascii=False))
        return
    for status in STATUS_ORDER:
        print(f"{status.label}: {content.summary.get(status, 0)}")
    print(f"Total: {len(content.adopters)}")


def main(argv=None):
    settings = get_settings()
    init_logging(settings.log_level)
    parser = argparse.ArgumentParser(description="Adoption tracker site builder")
    parser.add_argument("--adopters-dir", default=settings.adopters_dir, help="Directory of adopter YAML files (default from settings)")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_build = sub.add_parser("build", help="Validate adopters and render the static page")
    p_build.add_argument("--output-dir", default=settings.output_dir, help="Where to write index.html (default from settings)")
    p_build.add_argument("--no-json", action="store_true", help="Skip writing adopters.json")
    p_build.set_defaults(func=cmd_build)

    p_val = sub.add_parser("validate", help="Validate adopter files without rendering")
    p_val.set_defaults(func=cmd_validate)

    p_sum = sub.add_parser("summary", help="Print adoption status counts")
    p_sum.add_argument("--json", action="store_true", help="Print the full aggregate as JSON")
    p_sum.set_defaults(func=cmd_summary)

    args = parser.parse_args(argv)
    try:
        args.func(args)
    except AdopterLoadError as exc:
        logger.error(str(exc), extra={"step": args.cmd, "status": "failed", "error": type(exc).__name__})
        print(f"ERROR: {exc}", file=sys.stderr)
        raise SystemExit(1)


if __name__ == "__main__":
    main()
