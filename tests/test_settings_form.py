"""Tests for settings input parsing and the settings form widget."""

import pytest

from intervaltimer.ui.settings_form import (
    SettingsDraft, SettingsForm, parse_field,
    HOURS_RANGE, MINUTES_RANGE, CYCLES_RANGE,
)

from helpers import SignalCollector


# ═══════════════════════════════════════════════════════════════════════
#  FIELD PARSING
# ═══════════════════════════════════════════════════════════════════════


class TestParseField:

    @pytest.mark.parametrize("text, expected", [
        ("0", 0),
        ("7", 7),
        ("07", 7),
        ("59", 59),
    ])
    def test_valid(self, text, expected):
        assert parse_field(text, MINUTES_RANGE) == expected

    @pytest.mark.parametrize("text", [
        "", "abc", "1.5", "-1", "60", "1e3", " 12 ", "1_0", "+5", "\u0663",
    ])
    def test_invalid(self, text):
        assert parse_field(text, MINUTES_RANGE) is None

    def test_hours_upper_bound(self):
        assert parse_field("23", HOURS_RANGE) == 23
        assert parse_field("24", HOURS_RANGE) is None

    def test_cycles_bounds(self):
        assert parse_field("0", CYCLES_RANGE) is None
        assert parse_field("1", CYCLES_RANGE) == 1
        assert parse_field("100", CYCLES_RANGE) == 100
        assert parse_field("101", CYCLES_RANGE) is None


# ═══════════════════════════════════════════════════════════════════════
#  DRAFT (partial-field updates)
# ═══════════════════════════════════════════════════════════════════════


class TestSettingsDraft:

    def test_defaults(self):
        assert SettingsDraft().values() == (20, 10, 8)

    def test_parts(self):
        draft = SettingsDraft(on=3725)
        assert draft.parts("on") == (1, 2, 5)

    def test_update_hours_keeps_minutes_and_seconds(self):
        draft = SettingsDraft(on=65)
        assert draft.update("on", "hours", "1") is True
        assert draft.on == 3600 + 65

    def test_update_minutes(self):
        draft = SettingsDraft(on=3725)
        draft.update("on", "minutes", "10")
        assert draft.on == 3600 + 600 + 5

    def test_update_seconds(self):
        draft = SettingsDraft()
        draft.update("on", "seconds", "45")
        assert draft.on == 45

    def test_unparseable_minutes_ignored_while_hours_applied(self):
        draft = SettingsDraft(on=65)
        assert draft.update("on", "minutes", "ten") is False
        assert draft.update("on", "hours", "2") is True
        assert draft.parts("on") == (2, 1, 5)
        assert draft.on == 2 * 3600 + 65

    def test_off_side_is_independent(self):
        draft = SettingsDraft()
        draft.update("off", "minutes", "3")
        assert draft.off == 190
        assert draft.on == 20

    def test_underscore_digits_dropped(self):
        draft = SettingsDraft(on=65)
        assert draft.update("on", "minutes", "1_0") is False
        assert draft.on == 65
        assert draft.update_cycles(" 9") is False
        assert draft.cycles == 8

    def test_out_of_range_kept_previous(self):
        draft = SettingsDraft(off=30)
        assert draft.update("off", "seconds", "75") is False
        assert draft.off == 30

    def test_cycles(self):
        draft = SettingsDraft()
        assert draft.update_cycles("12") is True
        assert draft.cycles == 12
        assert draft.update_cycles("0") is False
        assert draft.update_cycles("lots") is False
        assert draft.cycles == 12

    def test_unknown_field(self):
        with pytest.raises(KeyError):
            SettingsDraft().update("middle", "hours", "1")


# ═══════════════════════════════════════════════════════════════════════
#  FORM WIDGET
# ═══════════════════════════════════════════════════════════════════════


@pytest.mark.usefixtures("qapp")
class TestSettingsForm:

    def test_populated_from_draft(self):
        form = SettingsForm(SettingsDraft(on=3725, off=10, cycles=4))
        assert form._sliders["on.hours"].value() == 1
        assert form._sliders["on.minutes"].value() == 2
        assert form._sliders["on.seconds"].value() == 5
        assert form._sliders["cycles"].value() == 4
        assert form._labels["on.minutes"].text() == "Minutes: 2"
        assert form._labels["off.seconds"].text() == "Seconds: 10"
        assert form._labels["cycles"].text() == "4"

    def test_slider_emits_timer_set(self):
        form = SettingsForm()
        c = SignalCollector()
        form.timer_set.connect(c)
        form._sliders["on.seconds"].setValue(30)
        assert c.last == (30, 10, 8)
        assert form._labels["on.seconds"].text() == "Seconds: 30"

    def test_cycles_slider(self):
        form = SettingsForm()
        c = SignalCollector()
        form.timer_set.connect(c)
        form._sliders["cycles"].setValue(15)
        assert c.last == (20, 10, 15)

    def test_bad_text_still_emits_previous_values(self):
        form = SettingsForm()
        c = SignalCollector()
        form.timer_set.connect(c)
        form.set_field("off.minutes", "soon")
        assert c.last == (20, 10, 8)
        assert form.draft.off == 10

    def test_populate_does_not_re_emit(self):
        form = SettingsForm()
        c = SignalCollector()
        form.timer_set.connect(c)
        form.set_field("on.minutes", "2")
        assert len(c) == 1
        assert form._sliders["on.minutes"].value() == 2
