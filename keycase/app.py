import argparse
import json
import logging
from pathlib import Path

from keycase.config import ConfigReferenceError, load_options
from keycase.csg import DegenerateGeometryError, node_to_dict
from keycase.features import (
    auxiliary_negative, auxiliary_positive, auxiliary_preview, build_features,
    compose_case,
)
from keycase.matrix import FlatMatrix
from keycase.scad import check_scad, compile_scad, write_scad
from keycase.validation import validate_options

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="keycase", description="Keyboard case auxiliary features → OpenSCAD")
    p.add_argument("--verbose", "-v", action="store_true", help="Log debug output")
    sub = p.add_subparsers(dest="cmd", required=True)

    b = sub.add_parser("build", help="Write SCAD files for the configured auxiliary features")
    b.add_argument("--config", default=None, help="Path to a JSON configuration (defaults if omitted)")
    b.add_argument("--out", required=True, help="Output directory")
    b.add_argument("--check", action="store_true", help="Syntax-check each SCAD file with openscad")
    b.add_argument("--stl", action="store_true", help="Also render case_aux.stl with openscad")
    b.add_argument("--json", action="store_true", help="Also dump each CSG tree as JSON")

    v = sub.add_parser("validate", help="Check a configuration without building geometry")
    v.add_argument("--config", default=None, help="Path to a JSON configuration (defaults if omitted)")

    return p


def run_build(
    config: Path | None, out_dir: Path, stl: bool = False, dump_json: bool = False,
    check: bool = False,
) -> int:
    options = load_options(config)
    engine = FlatMatrix(options)

    errors = validate_options(options, engine)
    if errors:
        for msg in errors:
            log.error(msg)
        return 1

    features = build_features(options, engine)
    trees = {
        "aux_positive": auxiliary_positive(features),
        "aux_negative": auxiliary_negative(features),
        "mcu_preview": auxiliary_preview(features),
        "case_aux": compose_case(features),
    }

    out_dir.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []
    for name, node in trees.items():
        written.append(write_scad(node, out_dir / f"{name}.scad", header=f"keycase: {name}"))
        if dump_json:
            (out_dir / f"{name}.json").write_text(
                json.dumps(node_to_dict(node), indent=2), encoding="utf-8",
            )

    if check:
        failed = False
        for scad_path in written:
            ok, msg = check_scad(scad_path)
            if not ok:
                log.error("SCAD check failed for %s: %s", scad_path.name, msg)
                failed = True
        if failed:
            return 1

    if stl:
        ok, msg, stl_path = compile_scad(out_dir / "case_aux.scad")
        if not ok:
            log.error("STL render failed: %s", msg)
            return 1
        log.info("Rendered %s", stl_path)

    print(f"Generated outputs in: {out_dir}")
    return 0


def run_validate(config: Path | None) -> int:
    options = load_options(config)
    errors = validate_options(options, FlatMatrix(options))
    for msg in errors:
        print(msg)
    if errors:
        return 1
    print("Configuration OK")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    config = Path(args.config) if args.config else None

    try:
        if args.cmd == "build":
            return run_build(
                config, Path(args.out).resolve(),
                stl=args.stl, dump_json=args.json, check=args.check,
            )
        if args.cmd == "validate":
            return run_validate(config)
    except (ConfigReferenceError, DegenerateGeometryError) as e:
        log.error("%s", e)
        return 1

    return 2
