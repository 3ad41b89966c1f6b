"""Tests for the level classifier."""

import pytest

from forge_levels.engine.classifier import (
    compute_levels,
    level_changes,
    next_level,
    resolve_override,
)
from forge_levels.engine.thresholds import build_thresholds
from forge_levels.models.assessment import Assessment, BodyProfile
from forge_levels.models.patterns import MovementPattern, SkillLevel, UnitPreference

B = SkillLevel.BEGINNER
I = SkillLevel.INTERMEDIATE  # noqa: E741
A = SkillLevel.ADVANCED


class TestBodyweightPass:
    """Tests for levels derived from bodyweight tests."""

    def test_empty_assessment_is_all_beginner(self):
        """Test that no data at all classifies every pattern as beginner."""
        levels = compute_levels(Assessment(), BodyProfile())

        assert set(levels) == set(MovementPattern)
        assert all(level is B for level in levels.values())

    @pytest.mark.parametrize(
        "field,pattern,values",
        [
            ("pushups", MovementPattern.HORIZONTAL_PUSH, [(9, B), (10, I), (19, I), (20, A)]),
            ("pike_pushups", MovementPattern.VERTICAL_PUSH, [(7, B), (8, I), (15, A)]),
            ("pullups", MovementPattern.VERTICAL_PULL, [(4, B), (5, I), (10, A)]),
            ("squats", MovementPattern.SQUAT, [(24, B), (25, I), (40, A)]),
            ("plank_hold_seconds", MovementPattern.CORE, [(59, B), (60, I), (90, A)]),
        ],
    )
    def test_thresholds_inclusive(self, field, pattern, values):
        """Test that meeting a threshold exactly counts."""
        for value, expected in values:
            levels = compute_levels(Assessment(**{field: value}), BodyProfile())
            assert levels[pattern] is expected, f"{field}={value}"

    @pytest.mark.parametrize(
        "field,pattern",
        [
            ("pushups", MovementPattern.HORIZONTAL_PUSH),
            ("pike_pushups", MovementPattern.VERTICAL_PUSH),
            ("pullups", MovementPattern.VERTICAL_PULL),
            ("squats", MovementPattern.SQUAT),
            ("walking_lunges", MovementPattern.LUNGE),
            ("single_leg_rdl", MovementPattern.HINGE),
            ("plank_hold_seconds", MovementPattern.CORE),
        ],
    )
    def test_more_reps_never_lowers_level(self, field, pattern):
        """Test monotonicity of rep and hold based metrics."""
        previous = B
        for value in range(0, 121):
            level = compute_levels(Assessment(**{field: value}), BodyProfile())[pattern]
            assert level >= previous
            previous = level

    def test_mile_time_lower_is_better(self):
        """Test mile time bands, including the strict advanced cut-off."""
        def cardio(minutes):
            return compute_levels(
                Assessment(mile_time_minutes=minutes), BodyProfile()
            )[MovementPattern.CARDIO]

        assert cardio(12) is B
        assert cardio(9.01) is B
        assert cardio(9.0) is I
        assert cardio(8.5) is I
        assert cardio(7.0) is I
        assert cardio(6.9) is A

    def test_faster_mile_never_lowers_level(self):
        """Test that decreasing mile time never decreases cardio level."""
        previous = B
        for tenths in range(150, 30, -1):
            level = compute_levels(
                Assessment(mile_time_minutes=tenths / 10), BodyProfile()
            )[MovementPattern.CARDIO]
            assert level >= previous
            previous = level

    def test_missing_or_zero_mile_time_is_no_signal(self):
        """Test that an absent mile time is not treated as a perfect time."""
        for value in (None, 0):
            levels = compute_levels(Assessment(mile_time_minutes=value), BodyProfile())
            assert levels[MovementPattern.CARDIO] is B

    def test_lunge_uses_squat_proxy_when_not_tested(self):
        """Test the squat-rep stability proxy for lunge and hinge."""
        levels = compute_levels(Assessment(squats=40), BodyProfile())

        assert levels[MovementPattern.SQUAT] is A
        assert levels[MovementPattern.LUNGE] is A
        assert levels[MovementPattern.HINGE] is A

    def test_best_of_dedicated_test_and_squat_reps(self):
        """Test that lunge and hinge take the better of their tests."""
        levels = compute_levels(
            Assessment(squats=25, walking_lunges=30, single_leg_rdl=9), BodyProfile()
        )

        assert levels[MovementPattern.LUNGE] is A
        assert levels[MovementPattern.HINGE] is I

    @pytest.mark.parametrize("dedicated", [None, 0])
    def test_zero_dedicated_test_matches_absent(self, dedicated):
        """Test that a recorded 0 and a missing result classify the same."""
        levels = compute_levels(
            Assessment(squats=40, walking_lunges=dedicated, single_leg_rdl=dedicated),
            BodyProfile(),
        )

        assert levels[MovementPattern.SQUAT] is A
        assert levels[MovementPattern.LUNGE] is A
        assert levels[MovementPattern.HINGE] is A

    def test_dedicated_test_counts_without_squats(self):
        levels = compute_levels(Assessment(walking_lunges=20, single_leg_rdl=15), BodyProfile())

        assert levels[MovementPattern.LUNGE] is I
        assert levels[MovementPattern.HINGE] is A
        assert levels[MovementPattern.SQUAT] is B

    def test_untested_patterns_start_at_beginner(self):
        """Test patterns with no bodyweight test."""
        levels = compute_levels(Assessment(pushups=50, pullups=50), BodyProfile())

        assert levels[MovementPattern.HORIZONTAL_PULL] is B
        assert levels[MovementPattern.CARRY] is B

    def test_rotation_uses_self_reported_experience(self):
        """Test rotation seeding from the self-reported level."""
        default = compute_levels(Assessment(), BodyProfile())
        reported = compute_levels(Assessment(experience_level=A), BodyProfile())

        assert default[MovementPattern.ROTATION] is B
        assert reported[MovementPattern.ROTATION] is A
        # Self-reported experience does not leak into tested patterns
        assert reported[MovementPattern.HORIZONTAL_PUSH] is B


class TestLoadPass:
    """Tests for levels derived from load tests."""

    def test_load_replaces_bodyweight_level_downwards(self, imperial_profile):
        """Test that a weak bench demotes a strong push-up result."""
        assessment = Assessment(pushups=25, bench_press_1rm=90)

        levels = compute_levels(assessment, imperial_profile)

        assert levels[MovementPattern.HORIZONTAL_PUSH] is B

    def test_load_replaces_bodyweight_level_upwards(self, imperial_profile):
        """Test that a strong squat promotes a weak bodyweight result."""
        assessment = Assessment(squats=5, squat_1rm=360)

        levels = compute_levels(assessment, imperial_profile)

        assert levels[MovementPattern.SQUAT] is A

    def test_overhead_press_replaces_advanced_push(self, imperial_profile):
        """Test that an intermediate press ratio demotes advanced pike push-ups."""
        assessment = Assessment(pike_pushups=20, overhead_press_1rm=120)  # 0.67x

        levels = compute_levels(assessment, imperial_profile)

        assert levels[MovementPattern.VERTICAL_PUSH] is I

    @pytest.mark.parametrize(
        "field,pattern,intermediate,advanced",
        [
            ("squat_1rm", MovementPattern.SQUAT, 1.5, 2.0),
            ("deadlift_1rm", MovementPattern.HINGE, 1.75, 2.5),
            ("bench_press_1rm", MovementPattern.HORIZONTAL_PUSH, 1.0, 1.5),
            ("overhead_press_1rm", MovementPattern.VERTICAL_PUSH, 0.6, 0.9),
            ("barbell_row_1rm", MovementPattern.HORIZONTAL_PULL, 1.0, 1.5),
            ("dumbbell_lunge_1rm", MovementPattern.LUNGE, 1.0, 1.5),
            ("farmers_carry_1rm", MovementPattern.CARRY, 1.5, 2.0),
        ],
    )
    def test_ratio_boundaries(self, metric_profile, field, pattern, intermediate, advanced):
        """Test each load test at and just below its multipliers."""
        weight = metric_profile.weight

        def level(load):
            return compute_levels(Assessment(**{field: load}), metric_profile)[pattern]

        assert level(weight * intermediate - 1) is B
        assert level(weight * intermediate) is I
        assert level(weight * advanced - 1) is I
        assert level(weight * advanced) is A

    @pytest.mark.parametrize(
        "field,pattern,multiplier,expected",
        [
            ("squat_1rm", MovementPattern.SQUAT, 2.0, A),
            ("deadlift_1rm", MovementPattern.HINGE, 1.75, I),
            ("overhead_press_1rm", MovementPattern.VERTICAL_PUSH, 0.6, I),
            ("overhead_press_1rm", MovementPattern.VERTICAL_PUSH, 0.9, A),
            ("farmers_carry_1rm", MovementPattern.CARRY, 1.5, I),
        ],
    )
    def test_exact_imperial_multiple_reaches_level(
        self, imperial_profile, field, pattern, multiplier, expected
    ):
        """Test that kg conversion does not drop an exact multiple below its cut-off."""
        load = imperial_profile.weight * multiplier

        levels = compute_levels(Assessment(**{field: load}), imperial_profile)

        assert levels[pattern] is expected

    def test_ratio_is_unit_independent(self):
        """Test that the same lift classifies the same in either unit."""
        imperial = compute_levels(
            Assessment(squat_1rm=330.693),
            BodyProfile(weight=176.37, unit_preference=UnitPreference.IMPERIAL),
        )
        metric = compute_levels(
            Assessment(squat_1rm=150),
            BodyProfile(weight=80, unit_preference=UnitPreference.METRIC),
        )

        assert imperial[MovementPattern.SQUAT] is metric[MovementPattern.SQUAT] is I

    @pytest.mark.parametrize("weight", [None, 0, -10])
    def test_unknown_body_weight_skips_load_pass(self, weight):
        """Test that loads are ignored without a usable body weight."""
        assessment = Assessment(pushups=25, bench_press_1rm=50)

        levels = compute_levels(assessment, BodyProfile(weight=weight))

        assert levels[MovementPattern.HORIZONTAL_PUSH] is A

    def test_zero_load_is_not_a_result(self, imperial_profile):
        """Test that a zero 1RM is treated as not tested."""
        assessment = Assessment(pushups=25, bench_press_1rm=0)

        levels = compute_levels(assessment, imperial_profile)

        assert levels[MovementPattern.HORIZONTAL_PUSH] is A

    def test_custom_threshold_table(self, imperial_profile):
        """Test that an injected table changes classification."""
        table = build_thresholds({"squat": {"load": {"intermediate": 1.0, "advanced": 1.5}}})
        assessment = Assessment(squat_1rm=300)

        default = compute_levels(assessment, imperial_profile)
        custom = compute_levels(assessment, imperial_profile, thresholds=table)

        assert default[MovementPattern.SQUAT] is I
        assert custom[MovementPattern.SQUAT] is A


class TestOverrides:
    """Tests for manual override handling."""

    @pytest.mark.parametrize("level", [B, I, A])
    @pytest.mark.parametrize("override", [B, I, A, None])
    def test_resolve_override_is_max(self, level, override):
        """Test that resolve_override returns the ordinal maximum."""
        expected = level if override is None else max(level, override, key=lambda x: x.rank)
        assert resolve_override(level, override) is expected

    def test_override_raises_level(self):
        """Test an override lifting a beginner pattern."""
        assessment = Assessment(overrides={MovementPattern.CARDIO: I})

        levels = compute_levels(assessment, BodyProfile())

        assert levels[MovementPattern.CARDIO] is I

    def test_override_never_lowers_level(self):
        """Test that a beginner override on an advanced pattern is ignored."""
        assessment = Assessment(pushups=30, overrides={MovementPattern.HORIZONTAL_PUSH: B})

        levels = compute_levels(assessment, BodyProfile())

        assert levels[MovementPattern.HORIZONTAL_PUSH] is A

    def test_override_applies_after_load_pass(self, imperial_profile):
        """Test that overrides apply on top of the load-derived level."""
        assessment = Assessment(
            bench_press_1rm=90, overrides={MovementPattern.HORIZONTAL_PUSH: I}
        )

        levels = compute_levels(assessment, imperial_profile)

        assert levels[MovementPattern.HORIZONTAL_PUSH] is I


class TestLevelHelpers:
    """Tests for next_level and level_changes."""

    def test_next_level(self):
        assert next_level(B) is I
        assert next_level(I) is A
        assert next_level(A) is None

    def test_level_changes_reports_increases_only(self):
        """Test that only ordinal increases count as leveling up."""
        previous = {MovementPattern.SQUAT: B, MovementPattern.CORE: A, MovementPattern.CARDIO: I}
        current = {MovementPattern.SQUAT: I, MovementPattern.CORE: I, MovementPattern.CARDIO: I}

        changes = level_changes(previous, current)

        assert changes == {MovementPattern.SQUAT: (B, I)}

    def test_level_changes_without_previous(self):
        assert level_changes(None, {MovementPattern.SQUAT: A}) == {}

    def test_computation_is_deterministic(self, sample_assessment, imperial_profile):
        """Test that the same inputs always give the same levels."""
        first = compute_levels(sample_assessment, imperial_profile)
        second = compute_levels(sample_assessment, imperial_profile)

        assert first == second


class TestEndToEndScenario:
    """The 180 lb imperial reference user."""

    def test_reference_user(self, imperial_profile):
        assessment = Assessment(pushups=15, squat_1rm=300, deadlift_1rm=None, mile_time_minutes=8.5)

        levels = compute_levels(assessment, imperial_profile)

        assert levels[MovementPattern.SQUAT] is I  # 300 / 180 = 1.67x
        assert levels[MovementPattern.HORIZONTAL_PUSH] is I  # 15 push-ups
        assert levels[MovementPattern.CARDIO] is I
        assert levels[MovementPattern.HORIZONTAL_PULL] is B
