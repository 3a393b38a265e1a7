"""Command that runs a graphene electron-transport report."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from nanoeda.graphene import GrapheneMaterial


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nanoeda", description="Simulate electron transport in graphene."
    )
    parser.add_argument(
        "--undoped", action="store_true", help="use intrinsic instead of doped graphene"
    )
    parser.add_argument(
        "--defect-density",
        type=float,
        default=1e10,
        help="surface defect density in atoms/cm² (default: 1e10)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    graphene = GrapheneMaterial(doped=not args.undoped)
    graphene.defect_density = args.defect_density
    graphene.simulate_electron_transport(file=sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())