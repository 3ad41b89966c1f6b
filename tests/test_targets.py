"""Tests for the progression target calculator."""

import math

import pytest

from forge_levels.engine.targets import get_progression_targets
from forge_levels.engine.thresholds import DEFAULT_THRESHOLDS, build_thresholds
from forge_levels.models.patterns import MovementPattern, SkillLevel, UnitPreference
from forge_levels.models.progression import NOT_APPLICABLE


class TestProgressionTargets:
    """Tests for get_progression_targets."""

    def test_all_patterns_present(self):
        """Test that every pattern gets a target record."""
        targets = get_progression_targets(180, UnitPreference.IMPERIAL)

        assert set(targets) == set(MovementPattern)

    def test_squat_targets_imperial(self):
        """Test weighted targets for a 180 lb user."""
        target = get_progression_targets(180, UnitPreference.IMPERIAL)[MovementPattern.SQUAT]

        assert target.bodyweight_test == "Bodyweight Squats"
        assert target.bodyweight_intermediate == "25 squats"
        assert target.bodyweight_advanced == "40 squats"
        assert target.weighted_test == "Squat 1RM"
        assert target.weighted_intermediate == "270 lbs"
        assert target.weighted_advanced == "360 lbs"

    def test_metric_label_and_rounding(self):
        """Test kg labels and rounding half up to a whole unit."""
        target = get_progression_targets(81, UnitPreference.METRIC)[MovementPattern.HINGE]

        assert target.weighted_intermediate == "142 kg"  # 141.75
        assert target.weighted_advanced == "203 kg"  # 202.5
        assert target.intermediate_load == pytest.approx(141.75)

    def test_half_pound_rounds_up(self):
        target = get_progression_targets(135, UnitPreference.IMPERIAL)[MovementPattern.SQUAT]

        assert target.weighted_intermediate == "203 lbs"  # 202.5
        assert target.weighted_advanced == "270 lbs"

    @pytest.mark.parametrize("weight", [None, 0])
    def test_missing_weight_gives_zero_targets(self, weight):
        """Test graceful degradation without a body weight."""
        targets = get_progression_targets(weight, UnitPreference.IMPERIAL)

        assert targets[MovementPattern.SQUAT].weighted_intermediate == "0 lbs"
        assert targets[MovementPattern.CARRY].weighted_advanced == "0 lbs"

    @pytest.mark.parametrize("weight", [55, 72.5, 180, 243])
    def test_targets_match_classifier_multipliers(self, weight):
        """Test that displayed loads come from the enforced multipliers."""
        targets = get_progression_targets(weight, UnitPreference.METRIC)

        for pattern in MovementPattern:
            load = DEFAULT_THRESHOLDS.for_pattern(pattern).load
            target = targets[pattern]
            if load is None:
                assert target.weighted_test == NOT_APPLICABLE
                continue
            assert target.intermediate_load == pytest.approx(weight * load.intermediate)
            assert target.advanced_load == pytest.approx(weight * load.advanced)
            expected = math.floor(weight * load.intermediate + 0.5)
            assert target.weighted_intermediate == f"{expected} kg"

    def test_custom_table_flows_into_targets(self):
        """Test that an injected table changes the displayed targets."""
        table = build_thresholds({"squat": {"load": {"intermediate": 1.25}}})

        target = get_progression_targets(200, UnitPreference.IMPERIAL, thresholds=table)[
            MovementPattern.SQUAT
        ]

        assert target.weighted_intermediate == "250 lbs"

    def test_bodyweight_text(self):
        """Test display text for time based tests."""
        targets = get_progression_targets(180, UnitPreference.IMPERIAL)

        assert targets[MovementPattern.CORE].bodyweight_intermediate == "60s plank hold"
        assert targets[MovementPattern.CARDIO].bodyweight_intermediate == (
            "Mile Run in 9 minutes or less"
        )
        assert targets[MovementPattern.CARDIO].bodyweight_advanced == "Mile Run under 7 minutes"
        assert targets[MovementPattern.HORIZONTAL_PUSH].bodyweight_advanced == "20 push-ups"

    def test_patterns_without_tests(self):
        """Test placeholder records for untested patterns."""
        targets = get_progression_targets(180, UnitPreference.IMPERIAL)

        assert targets[MovementPattern.VERTICAL_PULL].weighted_test == NOT_APPLICABLE
        assert targets[MovementPattern.HORIZONTAL_PULL].bodyweight_test == NOT_APPLICABLE
        assert targets[MovementPattern.HORIZONTAL_PULL].weighted_test == "Barbell Row 1RM"
        assert targets[MovementPattern.ROTATION].bodyweight_test == "Self-reported experience"
        assert not targets[MovementPattern.ROTATION].has_weighted_test

    def test_requirements_for_level(self):
        """Test picking the bodyweight and weighted targets for a level."""
        target = get_progression_targets(180, UnitPreference.IMPERIAL)[
            MovementPattern.HORIZONTAL_PUSH
        ]

        assert target.requirements_for(SkillLevel.INTERMEDIATE) == ("10 push-ups", "180 lbs")
        assert target.requirements_for(SkillLevel.ADVANCED) == ("20 push-ups", "270 lbs")

        core = get_progression_targets(180, UnitPreference.IMPERIAL)[MovementPattern.CORE]
        assert core.requirements_for(SkillLevel.ADVANCED) == ("90s plank hold", None)
