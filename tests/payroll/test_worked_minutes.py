from src.timekeeper.timekeeper.payroll.calculator.shift_anchored_calculator import (
    ShiftAnchoredCalculator,
    compute_worked_minutes,
)


def test_late_in_and_late_out_scenario():
    # 09:00-17:00 shift, 10 minutes late, 30 minutes overtime ignored
    assert compute_worked_minutes("09:00", "17:00", "09:10", "17:30") == 470


def test_exactly_on_schedule_credits_full_shift():
    assert compute_worked_minutes("09:00", "17:00", "09:00", "17:00") == 480


def test_early_arrival_grants_no_bonus():
    assert compute_worked_minutes("09:00", "17:00", "08:30", "17:00") == 480


def test_lateness_is_deducted_minute_for_minute():
    base = compute_worked_minutes("09:00", "17:00", "09:00", "17:00")
    for late in range(0, 120, 7):
        actual_in = f"{9 + late // 60:02d}:{late % 60:02d}"
        assert compute_worked_minutes("09:00", "17:00", actual_in, "17:00") == base - late


def test_leaving_early_is_counted_as_is():
    assert compute_worked_minutes("09:00", "17:00", "09:00", "12:00") == 180


def test_overtime_is_capped_at_scheduled_end():
    for out in ("17:00", "18:00", "23:59"):
        assert compute_worked_minutes("09:00", "17:00", "09:00", out) == 480


def test_never_negative():
    assert compute_worked_minutes("09:00", "17:00", "16:00", "10:00") == 0
    assert compute_worked_minutes("09:00", "17:00", "18:00", "19:00") == 0


def test_calculator_strategy_delegates():
    calc = ShiftAnchoredCalculator()
    assert (
        calc.worked_minutes(scheduled_start="09:00", scheduled_end="17:00", actual_in="09:10", actual_out="17:30")
        == 470
    )
