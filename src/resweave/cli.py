from __future__ import annotations

import argparse
import logging
import os
import sys

from resweave.composite import assemble
from resweave.config import (
    ENV_BASE_DIR,
    ENV_EXTENSION,
    ENV_PACKAGE,
    ENV_PARENT_PATH,
    ResolutionConfig,
)
from resweave.content import TemplateRef
from resweave.detect import DEFAULT_DETECTORS, detect_engine
from resweave.errors import ResWeaveError
from resweave.variants import (
    NamingStrategy,
    VariantFallbackResolver,
    directory_by,
    extension_by,
    suffix_by,
)

logger = logging.getLogger(__name__)

_STRATEGIES = {
    "suffix": suffix_by,
    "dir": directory_by,
    "ext": extension_by,
}


def _parse_tags(raw: list[str]) -> dict[str, str]:
    tags: dict[str, str] = {}
    for item in raw:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise ValueError(f"--tag must look like key=value, got {item!r}")
        tags[key.strip()] = value.strip()
    return tags


def _parse_strategy(raw: str) -> NamingStrategy:
    kind, sep, key = raw.partition(":")
    factory = _STRATEGIES.get(kind)
    if factory is None or not sep or not key:
        raise ValueError(
            f"--strategy must look like <{'|'.join(_STRATEGIES)}>:<tag>, got {raw!r}"
        )
    return factory(key)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="resweave", description="Resolve resource identifiers.")
    p.add_argument("--parent-path", type=str, default=os.environ.get(ENV_PARENT_PATH, ""))
    p.add_argument("--extension", type=str, default=os.environ.get(ENV_EXTENSION, ""))
    p.add_argument(
        "--package",
        type=str,
        default=os.environ.get(ENV_PACKAGE, ""),
        help="Package that bare and classpath: identifiers are relative to.",
    )
    p.add_argument("--base-dir", type=str, default=os.environ.get(ENV_BASE_DIR, ""))
    p.add_argument("--log-level", type=str, default=os.environ.get("RESWEAVE_LOG_LEVEL", "WARNING"))
    sub = p.add_subparsers(dest="command", required=True)

    r = sub.add_parser("resolve", help="Write the resource bytes to stdout.")
    r.add_argument("identifier")

    v = sub.add_parser("variant", help="Print the path chosen for a variant template.")
    v.add_argument("path")
    v.add_argument("--tag", action="append", default=[], help="Variant tag, key=value.")
    v.add_argument(
        "--strategy",
        action="append",
        default=[],
        help="Naming strategy, e.g. suffix:device or dir:locale. Tried in order.",
    )

    d = sub.add_parser("detect", help="Print the template engine for a template.")
    d.add_argument("identifier")
    return p


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=str(args.log_level).upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = ResolutionConfig.from_mapping(
            {
                "parent_path": args.parent_path,
                "extension": args.extension,
                "package": args.package,
                "base_dir": args.base_dir,
            }
        )
        resolver = assemble(config)

        if args.command == "resolve":
            sys.stdout.buffer.write(resolver.resolve(args.identifier).read_bytes())
            sys.stdout.flush()
        elif args.command == "variant":
            tags = _parse_tags(args.tag)
            variants = VariantFallbackResolver.of(
                resolver, [_parse_strategy(s) for s in args.strategy]
            )
            print(variants.get_real_path(TemplateRef(args.path, variant=tags or None)))
        elif args.command == "detect":
            resource = resolver.resolve(args.identifier)
            print(detect_engine(args.identifier, resource, DEFAULT_DETECTORS))
    except (ResWeaveError, ValueError) as e:
        logger.debug("command failed", exc_info=True)
        print(f"resweave: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
