"""
Generate an org chart and write it to disk.

Steps:
1. Generate the tree (seeded if --seed is given)
2. Validate it (skipped with --no-validate)
3. Write the tree, or its flattened grid rows with --rows
4. Write summary statistics next to it

Usage:
    python -m org_chart.scripts.generate_org_chart
    python -m org_chart.scripts.generate_org_chart --seed 42
    python -m org_chart.scripts.generate_org_chart --budget 500 --max-level 5
    python -m org_chart.scripts.generate_org_chart --rows --output data/rows.json
"""

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import Any, Dict, Optional

from org_chart.config import GenerationConfig, OutputConfig
from org_chart.generators.base_generator import BaseGenerator
from org_chart.generators.org_tree_generator import OrgTreeGenerator
from org_chart.graph import aggregation
from org_chart.graph.validator import TreeValidator

logger = logging.getLogger(__name__)


def run_generation(
    gen_config: Optional[GenerationConfig] = None,
    output_path: Optional[Path] = None,
    rows: bool = False,
    validate: bool = True,
    output: Optional[OutputConfig] = None,
) -> Dict[str, Any]:
    """Generate, validate and save one chart. Returns the run statistics."""
    gen_config = gen_config or GenerationConfig()
    output = output or OutputConfig()
    output_path = output_path or (output.rows_file if rows else output.tree_file)

    logger.info(
        f"Generating org chart: budget={gen_config.node_budget}, "
        f"max_level={gen_config.max_level}, seed={gen_config.seed}"
    )
    start_time = time.time()
    root = OrgTreeGenerator(gen_config).generate()

    stats = aggregation.summarize(root, seed=gen_config.seed)
    if validate:
        report = TreeValidator(gen_config.node_budget, gen_config.max_level).validate(root)
        stats["validation"] = report
        if not report["is_valid"]:
            raise RuntimeError(f"Generated org chart failed validation: {report}")

    data = aggregation.flatten(root) if rows else root.to_dict()
    BaseGenerator.save_json(data, output_path)
    BaseGenerator.save_json(stats, output_path.with_name(output_path.stem + "_stats.json"))

    logger.info(f"Generation complete in {time.time() - start_time:.1f}s")
    return stats


def main(argv=None):
    parser = argparse.ArgumentParser(description="Generate a synthetic org chart")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for a reproducible chart",
    )
    parser.add_argument(
        "--budget",
        type=int,
        default=None,
        help="Maximum number of nodes (default: 10000)",
    )
    parser.add_argument(
        "--max-level",
        type=int,
        default=None,
        help="Deepest level below the root (default: 8)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Output JSON file (default: data/org_chart.json)",
    )
    parser.add_argument(
        "--rows",
        action="store_true",
        help="Write flattened grid rows instead of the nested tree",
    )
    parser.add_argument(
        "--no-validate",
        action="store_true",
        help="Skip tree validation",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        gen_config = GenerationConfig.from_settings(
            node_budget=args.budget,
            max_level=args.max_level,
            seed=args.seed,
        )
        run_generation(
            gen_config=gen_config,
            output_path=args.output,
            rows=args.rows,
            validate=not args.no_validate,
        )
    except Exception as e:
        logger.error(f"Generation failed: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
