from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Tuple

from .config import load_config
from .errors import ConfigurationError, ValidationError
from .landmarks.vocabulary import landmark_display_name
from .models import PHOTO_TYPES
from .observations import Observation, observations_from_dicts
from .report import build_assessment_report
from .utils.logging import setup_logging
from .validation import parse_landmark_mapping, parse_landmark_records

logger = logging.getLogger(__name__)


def _load_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValidationError([f"{path}: not valid JSON ({exc})"]) from exc


def _split_input(data: Any) -> Tuple[Any, List[Dict[str, Any]]]:
    # A bare list is landmark records; an object may also carry observations.
    if isinstance(data, list):
        return data, []
    if isinstance(data, dict):
        if "landmarks" in data:
            landmarks, observations = data["landmarks"], data.get("observations") or []
            if not isinstance(landmarks, (list, dict)):
                raise ValidationError([f"landmarks: expected a list or an object, got {type(landmarks).__name__}"])
            if not isinstance(observations, list):
                raise ValidationError([f"observations: expected a list, got {type(observations).__name__}"])
            return landmarks, list(observations)
        return data, []
    raise ValidationError([f"expected a list or an object at the top level, got {type(data).__name__}"])


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="posturelab",
        description="Posture measurements from landmarks marked on standard body photos.",
    )
    p.add_argument("--config", default=None, help="Optional YAML config (thresholds, rounding, log level)")
    p.add_argument("--log-level", default=None, help="Override the configured log level")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_measure = sub.add_parser("measure", help="Compute measurements and print a JSON report")
    p_measure.add_argument("--input", required=True, help="JSON landmarks (flat records, per-photo mapping, or object)")
    p_measure.add_argument("--observations", default=None, help="Optional JSON list of observations")
    p_measure.add_argument("--out", default=None, help="Optional output JSON path")

    p_vocab = sub.add_parser("vocabulary", help="List the landmark labels valid on each photo")
    p_vocab.add_argument("--photo-type", choices=list(PHOTO_TYPES), default=None)
    return p


def _run_measure(args: argparse.Namespace, config) -> int:
    landmarks_raw, obs_raw = _split_input(_load_json(Path(args.input)))
    if args.observations:
        extra = _load_json(Path(args.observations))
        if not isinstance(extra, list):
            raise ValidationError([f"{args.observations}: expected a list of observations"])
        obs_raw.extend(extra)

    schema = config.build_schema()
    if isinstance(landmarks_raw, dict):
        landmarks = parse_landmark_mapping(landmarks_raw, schema=schema)
    else:
        landmarks = parse_landmark_records(landmarks_raw, schema=schema)
    observations: List[Observation] = observations_from_dicts(obs_raw)

    report = build_assessment_report(landmarks, observations, config=config, schema=schema)
    out_json = json.dumps(report, indent=2, ensure_ascii=False)
    if args.out:
        Path(args.out).write_text(out_json, encoding="utf-8")
        logger.info("Wrote %d measurements to %s", len(report["measurements"]), args.out)
    print(out_json)
    return 0


def _run_vocabulary(args: argparse.Namespace, config) -> int:
    schema = config.build_schema()
    photo_types = [args.photo_type] if args.photo_type else list(PHOTO_TYPES)
    payload = {
        pt: {
            "labels": [{"label": label, "display_name": landmark_display_name(label)} for label in schema.vocabulary(pt)],
            "calculators": {name: sorted(schema.required_labels(pt, name)) for name in schema.calculators_for(pt)},
        }
        for pt in photo_types
    }
    print(json.dumps(payload, indent=2, ensure_ascii=False))
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        config = load_config(Path(args.config) if args.config else None)
    except ConfigurationError as exc:
        setup_logging(args.log_level or "INFO")
        logger.error("%s", exc)
        return 1
    setup_logging(args.log_level or config.log_level)

    try:
        if args.cmd == "measure":
            return _run_measure(args, config)
        # argparse only accepts the two registered subcommands.
        return _run_vocabulary(args, config)
    except ValidationError as exc:
        logger.warning("Rejected input with %d problem(s)", len(exc.errors))
        for line in exc.errors:
            print(line, file=sys.stderr)
        return 2
    except ConfigurationError as exc:
        logger.error("%s", exc)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
