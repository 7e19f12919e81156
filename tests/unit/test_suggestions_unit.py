from conftest import make_activity

from routeplanner.core.suggestions import (
    generate_optimization_suggestions,
    get_energy_distribution,
)


def test_general_tips_always_present():
    tips = generate_optimization_suggestions([], "Oslo", 5, weather_backup=True)

    assert tips == [
        "Start early to avoid crowds at popular attractions",
        "Keep high-energy activities for when you're fresh",
    ]


def test_jet_lag_and_weather_tips():
    activities = [make_activity("1", "Beach", weather_dependent=True)]

    tips = generate_optimization_suggestions(activities, "Oslo", 2, weather_backup=True)
    no_backup = generate_optimization_suggestions(activities, "Oslo", 2, weather_backup=False)

    assert "Consider jet lag - schedule lighter activities for first 2 days" in tips
    assert "Have backup indoor options for weather-dependent activities" in tips
    assert "Have backup indoor options for weather-dependent activities" not in no_backup


def test_destination_tips_match_substring():
    tokyo = generate_optimization_suggestions([], "Shinjuku, Tokyo, Japan", 5, False)
    paris = generate_optimization_suggestions([], "PARIS", 5, False)
    new_york = generate_optimization_suggestions([], "New York City", 5, False)

    assert "Tokyo museums often close on Mondays" in tokyo
    assert "Many shops close on Sundays" in paris
    assert "Many attractions offer early bird discounts" in new_york
    assert len(tokyo) == len(paris) == len(new_york) == 4


def test_spread_tip_needs_more_than_two_high_energy():
    two = [make_activity(str(i), f"Hike {i}", energy_required="high") for i in range(2)]
    three = [make_activity(str(i), f"Hike {i}", energy_required="high") for i in range(3)]
    tip = "Consider spreading high-energy activities across multiple days"

    assert tip not in generate_optimization_suggestions(two, "Oslo", 5, False)
    assert tip in generate_optimization_suggestions(three, "Oslo", 5, False)


def test_energy_distribution_string():
    activities = [
        make_activity("1", "A", energy_required="high"),
        make_activity("2", "B", energy_required="low"),
        make_activity("3", "C", energy_required="low"),
    ]

    assert get_energy_distribution(activities) == "1 high, 0 medium, 2 low energy activities"
    assert get_energy_distribution([]) == "0 high, 0 medium, 0 low energy activities"
