"""Orchestration logic for compiling a type model into an HTML site."""

import argparse
import logging
import time

from apisite.generator import Generator
from apisite.load_config import load_config
from apisite.load_model import load_model
from apisite.wipe_out_target import wipe_out_target

logger = logging.getLogger(__name__)


def run_generation(args: argparse.Namespace) -> int:
    """Execute the full generation pipeline."""
    config = load_config(args.config)
    if args.no_progressbar:
        config["settings"]["progressbar"] = False

    model = load_model(args.model)
    if not model.types:
        logger.warning("No types found in model %s", args.model)
    logger.info("Loaded %d types from %s", len(model.types), args.model)

    out_root = args.out_dir.resolve()
    if args.wipe and not wipe_out_target(out_root, config):
        msg = f"Cannot wipe out target directory {out_root}"
        raise SystemExit(msg)
    out_root.mkdir(parents=True, exist_ok=True)

    start = time.time()
    generator = Generator(model)
    index = generator.generate(out_root, config)

    print(
        f"Generated {generator.written} pages for {len(index.all_by_name)} types, "
        f"{len(index.namespaces)} namespaces and {len(index.packages)} packages "
        f"into: {out_root} ({time.time() - start:.1f}s)"
    )
    return 0
