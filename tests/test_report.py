from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path

from posturelab.config import EngineConfig, load_config
from posturelab.errors import ConfigurationError
from posturelab.models import LandmarkSet, Point
from posturelab.observations import Observation
from posturelab.report import NO_MEASUREMENTS_MESSAGE, build_assessment_report

from landmark_fixtures import landmark_set

SCENARIO_A = LandmarkSet.from_points(
    {"front": [Point("shoulder_left", 0.30, 0.40), Point("shoulder_right", 0.70, 0.42)]}
)


class AssessmentReportTests(unittest.TestCase):
    def test_rounding_happens_only_in_the_report(self) -> None:
        report = build_assessment_report(SCENARIO_A)
        record = report["measurements"][0]
        self.assertEqual(record["name"], "shoulders_horizontal_level")
        self.assertEqual(record["value"], 2.9)
        self.assertEqual(record["display_value"], "2.9°")
        self.assertEqual(record["severity"], "mild")
        self.assertEqual(record["severity_label"], "Mild")
        self.assertEqual(record["contributing_landmarks"], ["shoulder_left", "shoulder_right"])
        self.assertIsNone(report["message"])

    def test_ratio_measurements_shown_as_percent(self) -> None:
        landmarks = LandmarkSet.from_points(
            {
                "front": [
                    Point("shoulder_left", 0.30, 0.22),
                    Point("shoulder_right", 0.72, 0.22),
                    Point("neck_base", 0.50, 0.19),
                ]
            }
        )
        report = build_assessment_report(landmarks)
        by_name = {m["name"]: m for m in report["measurements"]}
        offset = by_name["shoulder_symmetry_offset"]
        self.assertEqual(offset["unit"], "ratio")
        self.assertEqual(offset["value"], 0.048)
        self.assertEqual(offset["display_value"], "4.8%")
        self.assertEqual(offset["severity"], "mild")

    def test_percent_display_independent_of_angle_decimals(self) -> None:
        landmarks = LandmarkSet.from_points(
            {
                "front": [
                    Point("shoulder_left", 0.30, 0.22),
                    Point("shoulder_right", 0.71, 0.22),
                    Point("neck_base", 0.50, 0.19),
                ]
            }
        )
        report = build_assessment_report(landmarks, config=EngineConfig(angle_decimals=0, ratio_decimals=3))
        offset = {m["name"]: m for m in report["measurements"]}["shoulder_symmetry_offset"]
        self.assertEqual(offset["value"], 0.024)
        self.assertEqual(offset["display_value"], "2.4%")

        report = build_assessment_report(landmarks, config=EngineConfig(percent_decimals=2))
        offset = {m["name"]: m for m in report["measurements"]}["shoulder_symmetry_offset"]
        self.assertEqual(offset["display_value"], "2.44%")

    def test_empty_assessment_reports_no_measurements_yet(self) -> None:
        report = build_assessment_report(LandmarkSet())
        self.assertEqual(report["measurements"], [])
        self.assertEqual(report["message"], NO_MEASUREMENTS_MESSAGE)
        self.assertEqual(report["photos"], [])

    def test_report_is_json_serializable_and_groups_observations(self) -> None:
        observations = [
            Observation("head", "Forward head", "moderate", "side_left"),
            Observation("knee_left", "Valgus", "mild", "front"),
        ]
        report = build_assessment_report(landmark_set(), observations)
        json.dumps(report)
        self.assertEqual(list(report["observations"]), ["front", "side_left"])
        self.assertEqual(sum(report["severity_counts"].values()), len(report["measurements"]))
        self.assertEqual([p["photo_type"] for p in report["photos"]], ["front", "back", "side_left", "side_right"])
        knees = [m for m in report["measurements"] if m["name"] == "knees_valgus_varus_symmetry"][0]
        self.assertEqual(set(knees["details"]), {"left", "right"})

    def test_threshold_overrides_change_severity(self) -> None:
        cfg = EngineConfig(threshold_overrides={"shoulders_horizontal_level": (3.0, 6.0, 12.0)})
        report = build_assessment_report(SCENARIO_A, config=cfg)
        self.assertEqual(report["measurements"][0]["severity"], "normal")

    def test_decimals_are_configurable(self) -> None:
        report = build_assessment_report(SCENARIO_A, config=EngineConfig(angle_decimals=3))
        self.assertEqual(report["measurements"][0]["value"], 2.862)
        self.assertEqual(report["measurements"][0]["display_value"], "2.862°")


class ConfigLoadingTests(unittest.TestCase):
    def test_missing_file_gives_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            cfg = load_config(Path(tmpdir) / "absent.yaml")
        self.assertEqual(cfg, EngineConfig())

    def test_yaml_overrides(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "posturelab.yaml"
            path.write_text(
                "threshold_overrides:\n"
                "  shoulders_horizontal_level: [3.0, 6.0, 12.0]\n"
                "angle_decimals: 2\n"
                "log_level: DEBUG\n",
                encoding="utf-8",
            )
            cfg = load_config(path)
        self.assertEqual(cfg.angle_decimals, 2)
        self.assertEqual(cfg.log_level, "DEBUG")
        self.assertEqual(cfg.build_classifier().thresholds_for("shoulders_horizontal_level"), (3.0, 6.0, 12.0))

    def test_bad_configs_are_configuration_errors(self) -> None:
        bad_documents = [
            "- just\n- a list\n",
            "unknown_key: 1\n",
            "threshold_overrides:\n  shoulders_horizontal_level: [6.0, 3.0, 12.0]\n",
            "threshold_overrides:\n  no_such_measure: [1.0, 2.0, 3.0]\n",
            "angle_decimals: [unclosed\n",
        ]
        with tempfile.TemporaryDirectory() as tmpdir:
            for idx, doc in enumerate(bad_documents):
                path = Path(tmpdir) / f"bad_{idx}.yaml"
                path.write_text(doc, encoding="utf-8")
                with self.assertRaises(ConfigurationError, msg=doc):
                    load_config(path)


if __name__ == "__main__":
    unittest.main()
