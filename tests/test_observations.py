from __future__ import annotations

import unittest

from posturelab.errors import ValidationError
from posturelab.models import Point
from posturelab.observations import (
    JOINT_LABELS,
    PREDEFINED_OBSERVATIONS,
    Observation,
    group_by_photo_type,
    observations_from_dicts,
    validate_observation,
)


class GroupingTests(unittest.TestCase):
    def test_five_observations_three_photos(self) -> None:
        a = Observation("shoulder_left", "Elevated shoulder", "mild", "front")
        b = Observation("spine_thoracic", "Hyperkyphosis", "moderate", "back")
        c = Observation("knee_right", "Valgus", "mild", "front")
        d = Observation("head", "Forward head", "severe", "side_left", Point("head", 0.55, 0.08))
        e = Observation("hip_left", "Elevation", "normal", "back")

        groups = group_by_photo_type([a, b, c, d, e])

        self.assertEqual(list(groups), ["front", "back", "side_left"])
        self.assertEqual(groups["front"], [a, c])
        self.assertEqual(groups["back"], [b, e])
        self.assertEqual(groups["side_left"], [d])
        self.assertEqual(sum(len(v) for v in groups.values()), 5)

    def test_groups_follow_canonical_photo_order(self) -> None:
        obs = [
            Observation("ankle_right", "Pronation", "mild", "side_right"),
            Observation("head", "Lateral tilt", "mild", "front"),
        ]
        self.assertEqual(list(group_by_photo_type(obs)), ["front", "side_right"])

    def test_empty_input(self) -> None:
        self.assertEqual(group_by_photo_type([]), {})


class ObservationVocabularyTests(unittest.TestCase):
    def test_every_joint_has_predefined_texts(self) -> None:
        self.assertEqual(set(PREDEFINED_OBSERVATIONS), set(JOINT_LABELS))
        for joint, texts in PREDEFINED_OBSERVATIONS.items():
            self.assertTrue(texts, joint)

    def test_custom_flag(self) -> None:
        self.assertFalse(Observation("knee_left", "Valgus", "mild", "front").is_custom)
        self.assertTrue(Observation("knee_left", "Clicks when squatting", "mild", "front").is_custom)

    def test_validate_rejects_unknown_joint_and_severity(self) -> None:
        with self.assertRaises(ValidationError) as ctx:
            validate_observation(Observation("elbow_left", "Flexion", "extreme", "front"))  # type: ignore[arg-type]
        self.assertEqual(len(ctx.exception.errors), 2)

    def test_from_dicts_accepts_camel_case_photo_type(self) -> None:
        obs = observations_from_dicts(
            [{"joint": "neck", "observation": "Lateral tilt", "severity": "mild", "photoType": "back"}]
        )
        self.assertEqual(obs[0].photo_type, "back")
        self.assertEqual(obs[0].text, "Lateral tilt")

    def test_from_dicts_reports_every_bad_record(self) -> None:
        with self.assertRaises(ValidationError) as ctx:
            observations_from_dicts(
                [
                    {"joint": "neck", "text": "Lateral tilt", "severity": "mild", "photo_type": "back"},
                    {"joint": "neck", "text": "", "severity": "mild", "photo_type": "back"},
                    {"joint": "neck", "text": "x", "severity": "mild", "photo_type": "top", "position": {"x": 2, "y": 0}},
                ]
            )
        joined = " ".join(ctx.exception.errors)
        self.assertNotIn("observation 0", joined)
        self.assertIn("observation 1", joined)
        self.assertIn("observation 2", joined)


if __name__ == "__main__":
    unittest.main()
